import logging

from django.contrib import messages
from django.core.exceptions import BadRequest
from django.http import Http404
from django.shortcuts import redirect
from django.utils.translation import gettext_lazy as _
from django.views.generic import DetailView, ListView, TemplateView

from .constants import SUBMISSION_SUCCESS_MESSAGE
from .exceptions import AdmissionNotFound
from .models import AdmissionRecord
from .state import AdmissionFormState, Section
from .services import AdmissionService

logger = logging.getLogger(__name__)


# ==================== PUBLIC VIEWS ====================

class AdmissionFormView(TemplateView):
    """
    The public admission form.

    Every POST carries the whole form. Buttons other than submit (add or
    remove a row, copy the address, fill in the academic year) change the
    state and render the form again without validating it.
    """
    template_name = 'admission/public/apply.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        state = kwargs.get('state') or AdmissionFormState()
        bundle = state.build_forms()
        context.update({
            'state': state,
            'form': bundle.form,
            'sibling_formset': bundle.siblings,
            'vaccination_formset': bundle.vaccinations,
            'visible': state.rendered_sections(),
            'sections': Section,
        })
        return context

    def post(self, request, *args, **kwargs):
        state = AdmissionFormState.from_post(request.POST)
        action = request.POST.get('action', 'submit')

        if action != 'submit':
            try:
                state.apply_action(action)
            except (ValueError, IndexError) as e:
                raise BadRequest(str(e))
            return self.render_to_response(self.get_context_data(state=state))

        result = state.submit()
        if result.success:
            messages.success(request, SUBMISSION_SUCCESS_MESSAGE)
            return redirect('admission:submitted', pk=result.id)

        messages.error(request, result.error)
        return self.render_to_response(self.get_context_data(state=state))


class AdmissionSubmittedView(TemplateView):
    template_name = 'admission/public/submitted.html'

    def get_context_data(self, **kwargs):
        if not AdmissionRecord.objects.filter(pk=self.kwargs['pk']).exists():
            raise Http404(_("Admission not found"))

        context = super().get_context_data(**kwargs)
        context['reference'] = str(self.kwargs['pk'])[:8].upper()
        context['success_message'] = SUBMISSION_SUCCESS_MESSAGE
        return context


# ==================== STAFF VIEWS ====================

class AdmissionListView(ListView):
    template_name = 'admission/staff/list.html'
    context_object_name = 'admissions'

    def get_queryset(self):
        return AdmissionService.list_admissions()


class AdmissionDetailView(DetailView):
    template_name = 'admission/staff/detail.html'
    context_object_name = 'admission'

    def get_object(self, queryset=None):
        try:
            return AdmissionService.get_admission(self.kwargs['pk'])
        except AdmissionNotFound:
            logger.info(f"Admission {self.kwargs['pk']} requested but not found")
            raise Http404(_("Admission not found"))
