import django.core.validators
import django.db.models.deletion
import encrypted_model_fields.fields
import uuid
from django.db import migrations, models


BRANCH_CHOICES = [('T. Pudur', 'T. Pudur'), ('Surakullam', 'Surakullam')]
STANDARD_CHOICES = [('LKG', 'LKG'), ('UKG', 'UKG')] + [(f'Class {n}', f'Class {n}') for n in range(1, 13)]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='AdmissionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True, verbose_name='Universal ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Creation Timestamp')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last Modification Timestamp')),
                ('school_branch', models.CharField(choices=BRANCH_CHOICES, db_index=True, max_length=50, verbose_name='School Branch')),
                ('purpose_of_form', models.CharField(choices=[('New Admission', 'New Admission'), ('Re-Admission', 'Re-Admission (left and rejoined)'), ('Update Existing Details', 'Update Existing Details')], max_length=50, verbose_name='Purpose of Form')),
                ('academic_year', models.CharField(help_text='e.g., 2025-2026', max_length=20, verbose_name='Academic Year')),
                ('student_full_name', models.CharField(max_length=200, verbose_name='Student Full Name')),
                ('date_of_birth', models.CharField(max_length=20, verbose_name='Date of Birth')),
                ('gender', models.CharField(choices=[('Male', 'Male'), ('Female', 'Female'), ('Other', 'Other')], max_length=10, verbose_name='Gender')),
                ('nationality', models.CharField(default='Indian', max_length=50, verbose_name='Nationality')),
                ('religion', models.CharField(blank=True, choices=[('Hindu', 'Hindu'), ('Muslim', 'Muslim'), ('Christian', 'Christian'), ('Sikh', 'Sikh'), ('Buddhist', 'Buddhist'), ('Jain', 'Jain'), ('Parsi (Zoroastrian)', 'Parsi (Zoroastrian)'), ('Jewish', 'Jewish'), ('Other', 'Other'), ('Prefer not to say', 'Prefer not to say')], max_length=50, verbose_name='Religion')),
                ('caste_category', models.CharField(choices=[('General', 'General'), ('OBC', 'OBC (Other Backward Classes)'), ('SC', 'SC (Scheduled Caste)'), ('ST', 'ST (Scheduled Tribe)'), ('EWS', 'EWS (Economically Weaker Section)'), ('Other', 'Other')], max_length=20, verbose_name='Caste Category')),
                ('sub_caste', models.CharField(blank=True, max_length=100, verbose_name='Sub-Caste')),
                ('aadhaar_number', encrypted_model_fields.fields.EncryptedCharField(validators=[django.core.validators.RegexValidator(message='Aadhaar must be 12 digits', regex='^[0-9]{12}\\Z')], verbose_name='Aadhaar Number')),
                ('blood_group', models.CharField(blank=True, choices=[('A+', 'A+'), ('A-', 'A-'), ('B+', 'B+'), ('B-', 'B-'), ('AB+', 'AB+'), ('AB-', 'AB-'), ('O+', 'O+'), ('O-', 'O-'), ('Unknown', 'Unknown')], max_length=10, verbose_name='Blood Group')),
                ('identification_marks', models.TextField(blank=True, verbose_name='Identification Marks')),
                ('special_needs_or_disabilities', models.TextField(blank=True, verbose_name='Special Needs or Disabilities')),
                ('current_residential_address', models.TextField(verbose_name='Current Residential Address')),
                ('permanent_address', models.TextField(blank=True, verbose_name='Permanent Address')),
                ('admission_type', models.CharField(choices=[('New Admission', 'New Admission'), ('Existing Student', 'Existing Student (updating details)'), ('Re-Admission', 'Re-Admission')], max_length=30, verbose_name='Admission Type')),
                ('current_last_standard', models.CharField(blank=True, choices=[('Not Applicable', 'Not Applicable')] + STANDARD_CHOICES, max_length=20, verbose_name='Current/Last Standard')),
                ('current_last_section', models.CharField(blank=True, choices=[('Not Applicable', 'Not Applicable'), ('A', 'A'), ('B', 'B'), ('C', 'C'), ('D', 'D'), ('E', 'E'), ('F', 'F')], max_length=20, verbose_name='Current/Last Section')),
                ('standard_applying_for', models.CharField(choices=STANDARD_CHOICES, max_length=20, verbose_name='Standard Applying For')),
                ('previous_school_name', models.CharField(blank=True, max_length=200, verbose_name='Previous School Name')),
                ('previous_school_address', models.TextField(blank=True, verbose_name='Previous School Address')),
                ('last_class_attended', models.CharField(blank=True, max_length=50, verbose_name='Last Class Attended')),
                ('year_of_passing_last_class', models.CharField(blank=True, max_length=10, verbose_name='Year of Passing Last Class')),
                ('marks_percentage_last_exam', models.CharField(blank=True, max_length=20, verbose_name='Marks/Percentage in Last Exam')),
                ('is_rejoining', models.BooleanField(default=False, verbose_name='Is Rejoining')),
                ('previous_roll_number', models.CharField(blank=True, max_length=50, verbose_name='Previous Roll Number')),
                ('year_standard_when_left', models.CharField(blank=True, max_length=50, verbose_name='Year/Standard When Left')),
                ('reason_for_leaving', models.TextField(blank=True, verbose_name='Reason for Leaving')),
                ('reason_for_rejoining', models.TextField(blank=True, verbose_name='Reason for Rejoining')),
                ('extracurricular_interests', models.TextField(blank=True, verbose_name='Extracurricular Interests')),
                ('has_siblings_in_school', models.BooleanField(default=False, verbose_name='Has Siblings in School')),
                ('father_full_name', models.CharField(max_length=200, verbose_name="Father's Full Name")),
                ('father_occupation', models.CharField(max_length=100, verbose_name="Father's Occupation")),
                ('father_annual_income', models.CharField(blank=True, max_length=50, verbose_name="Father's Annual Income")),
                ('father_mobile_number', models.CharField(max_length=10, validators=[django.core.validators.RegexValidator(message='Mobile must be 10 digits', regex='^[0-9]{10}\\Z')], verbose_name="Father's Mobile Number")),
                ('father_email', models.EmailField(blank=True, max_length=254, verbose_name="Father's Email")),
                ('father_aadhaar_number', encrypted_model_fields.fields.EncryptedCharField(blank=True, verbose_name="Father's Aadhaar Number")),
                ('mother_full_name', models.CharField(max_length=200, verbose_name="Mother's Full Name")),
                ('mother_occupation', models.CharField(max_length=100, verbose_name="Mother's Occupation")),
                ('mother_annual_income', models.CharField(blank=True, max_length=50, verbose_name="Mother's Annual Income")),
                ('mother_mobile_number', models.CharField(max_length=10, validators=[django.core.validators.RegexValidator(message='Mobile must be 10 digits', regex='^[0-9]{10}\\Z')], verbose_name="Mother's Mobile Number")),
                ('mother_email', models.EmailField(blank=True, max_length=254, verbose_name="Mother's Email")),
                ('mother_aadhaar_number', encrypted_model_fields.fields.EncryptedCharField(blank=True, verbose_name="Mother's Aadhaar Number")),
                ('guardian_name', models.CharField(blank=True, max_length=200, verbose_name='Guardian Name')),
                ('guardian_relation', models.CharField(blank=True, max_length=50, verbose_name='Guardian Relation')),
                ('guardian_occupation', models.CharField(blank=True, max_length=100, verbose_name='Guardian Occupation')),
                ('guardian_mobile_number', models.CharField(blank=True, max_length=15, verbose_name='Guardian Mobile Number')),
                ('guardian_aadhaar_number', encrypted_model_fields.fields.EncryptedCharField(blank=True, verbose_name='Guardian Aadhaar Number')),
                ('emergency_contact_name', models.CharField(blank=True, max_length=200, verbose_name='Emergency Contact Name')),
                ('emergency_contact_relation', models.CharField(blank=True, max_length=50, verbose_name='Emergency Contact Relation')),
                ('emergency_contact_mobile', models.CharField(blank=True, max_length=15, verbose_name='Emergency Contact Mobile')),
                ('transport_required', models.BooleanField(default=False, verbose_name='Transport Required')),
                ('pickup_drop_location', models.CharField(blank=True, max_length=255, verbose_name='Pickup/Drop Location')),
                ('medical_history_or_allergies', models.TextField(blank=True, verbose_name='Medical History or Allergies')),
                ('declaration_accepted', models.BooleanField(default=False, verbose_name='Declaration Accepted')),
            ],
            options={
                'verbose_name': 'Admission Record',
                'verbose_name_plural': 'Admission Records',
                'db_table': 'admission_records',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['school_branch', 'created_at'], name='admission_branch_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='Sibling',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True, verbose_name='Universal ID')),
                ('position', models.PositiveSmallIntegerField(default=0, verbose_name='Position')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('class_grade', models.CharField(max_length=50, verbose_name='Class/Grade')),
                ('roll_number', models.CharField(blank=True, max_length=50, verbose_name='Roll Number')),
                ('branch', models.CharField(choices=BRANCH_CHOICES, max_length=50, verbose_name='Branch')),
                ('admission', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='siblings', to='admission.admissionrecord', verbose_name='Admission')),
            ],
            options={
                'verbose_name': 'Sibling',
                'verbose_name_plural': 'Siblings',
                'db_table': 'admission_siblings',
                'ordering': ['admission', 'position'],
            },
        ),
        migrations.CreateModel(
            name='Vaccination',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, unique=True, verbose_name='Universal ID')),
                ('position', models.PositiveSmallIntegerField(default=0, verbose_name='Position')),
                ('vaccine_name', models.CharField(max_length=100, verbose_name='Vaccine Name')),
                ('vaccination_date', models.CharField(max_length=20, verbose_name='Vaccination Date')),
                ('admission', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='vaccinations', to='admission.admissionrecord', verbose_name='Admission')),
            ],
            options={
                'verbose_name': 'Vaccination',
                'verbose_name_plural': 'Vaccinations',
                'db_table': 'admission_vaccinations',
                'ordering': ['admission', 'position'],
            },
        ),
    ]
