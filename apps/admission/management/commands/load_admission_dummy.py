import random

from django.core.management.base import BaseCommand, CommandError
from faker import Faker

from apps.admission.constants import (
    AdmissionType,
    CasteCategory,
    FormPurpose,
    Gender,
    SchoolBranch,
    STANDARD_CHOICES,
)
from apps.admission.exceptions import AdmissionValidationError
from apps.admission.services import AdmissionService

VACCINES = ['BCG', 'OPV', 'DPT', 'Hepatitis B', 'MMR', 'Typhoid', 'Varicella']


class Command(BaseCommand):
    help = 'Loads dummy admission submissions for local development'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=10, help='Number of submissions to create')
        parser.add_argument('--seed', type=int, help='Seed for repeatable data')

    def handle(self, *args, **options):
        count = options['count']
        fake = Faker('en_IN')

        if options['seed'] is not None:
            Faker.seed(options['seed'])
            random.seed(options['seed'])

        self.stdout.write('Creating admission dummy data...')

        created = 0
        for _ in range(count):
            data = self.build_submission(fake)
            try:
                result = AdmissionService.submit_raw(data)
            except AdmissionValidationError as e:
                raise CommandError(f'Generated data failed validation: {e.errors}')

            if not result.success:
                raise CommandError(result.error)
            created += 1

        self.stdout.write(self.style.SUCCESS(f'Successfully created {created} dummy admissions'))

    def build_submission(self, fake):
        last_name = fake.last_name()
        address = fake.address().replace('\n', ', ')
        admission_type = random.choice([choice for choice, _ in AdmissionType.CHOICES])
        has_siblings = random.choice([True, False])
        transport = random.choice([True, False])
        year = fake.date_this_year().year

        return {
            'school_branch': random.choice([choice for choice, _ in SchoolBranch.CHOICES]),
            'purpose_of_form': FormPurpose.NEW_ADMISSION,
            'academic_year': f'{year}-{year + 1}',
            'student_full_name': f'{fake.first_name()} {last_name}',
            'date_of_birth': fake.date_of_birth(minimum_age=3, maximum_age=17).isoformat(),
            'gender': random.choice([choice for choice, _ in Gender.CHOICES]),
            'nationality': 'Indian',
            'caste_category': random.choice([choice for choice, _ in CasteCategory.CHOICES]),
            'aadhaar_number': fake.numerify('############'),
            'current_residential_address': address,
            'permanent_address': address,
            'admission_type': admission_type,
            'current_last_standard': (
                random.choice(STANDARD_CHOICES)[0]
                if admission_type in AdmissionType.WITH_CURRENT_STANDARD else ''
            ),
            'standard_applying_for': random.choice(STANDARD_CHOICES)[0],
            'previous_school_name': f'{fake.city()} Public School',
            'has_siblings_in_school': has_siblings,
            'father_full_name': f'{fake.first_name_male()} {last_name}',
            'father_occupation': fake.job()[:100],
            'father_mobile_number': fake.numerify('9#########'),
            'father_email': fake.email(),
            'mother_full_name': f'{fake.first_name_female()} {last_name}',
            'mother_occupation': fake.job()[:100],
            'mother_mobile_number': fake.numerify('8#########'),
            'transport_required': transport,
            'pickup_drop_location': fake.street_name() if transport else '',
            'declaration_accepted': True,
            'siblings': [
                {
                    'name': f'{fake.first_name()} {last_name}',
                    'class_grade': random.choice(STANDARD_CHOICES)[0],
                    'roll_number': fake.numerify('##'),
                    'branch': random.choice([choice for choice, _ in SchoolBranch.CHOICES]),
                }
                for _ in range(random.randint(1, 2) if has_siblings else 0)
            ],
            'vaccinations': [
                {
                    'vaccine_name': vaccine,
                    'vaccination_date': fake.date_between(start_date='-10y').isoformat(),
                }
                for vaccine in random.sample(VACCINES, random.randint(0, 3))
            ],
        }
