import uuid

import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Region',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=128)),
                ('code', models.CharField(max_length=8, unique=True)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Crop',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=128, unique=True)),
                ('season', models.CharField(choices=[('Kharif', 'Kharif'), ('Rabi', 'Rabi'), ('Perennial', 'Perennial')], max_length=16)),
                ('description', models.TextField(blank=True)),
                ('expectedYield', models.CharField(blank=True, max_length=64)),
                ('growthDuration', models.PositiveIntegerField(help_text='Growth duration in days')),
                ('waterRequirement', models.CharField(blank=True, max_length=32)),
                ('soilCompatibility', models.JSONField(default=list, help_text='Names of the soil types this crop grows well in')),
                ('image', models.CharField(blank=True, max_length=256)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='LogMessage',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('createdAt', models.DateTimeField(default=django.utils.timezone.now)),
                ('relatedResourceId', models.CharField(blank=True, max_length=64, null=True)),
                ('logLevel', models.CharField(max_length=24)),
                ('message', models.TextField()),
            ],
            options={
                'ordering': ['-createdAt'],
            },
        ),
        migrations.CreateModel(
            name='SoilType',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=128)),
                ('description', models.TextField(blank=True)),
                ('phRange', models.CharField(blank=True, max_length=32)),
                ('characteristics', models.TextField(blank=True)),
                ('region', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='soilTypes', to='crop_adviser_backend.region')),
            ],
            options={
                'ordering': ['name'],
                'constraints': [models.UniqueConstraint(fields=('region', 'name'), name='unique_soil_type_name_per_region')],
            },
        ),
        migrations.CreateModel(
            name='Userprofile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('username', models.CharField(error_messages={'unique': 'A user with that username already exists.'}, help_text='Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.', max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name='username')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email address')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('profileImageUrl', models.CharField(blank=True, max_length=512)),
                ('createdAt', models.DateTimeField(auto_now_add=True)),
                ('updatedAt', models.DateTimeField(auto_now=True)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
                ('selectedRegion', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='crop_adviser_backend.region')),
                ('selectedSoilType', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='crop_adviser_backend.soiltype')),
            ],
            options={
                'verbose_name': 'user',
                'verbose_name_plural': 'users',
                'abstract': False,
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='WeatherSnapshot',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('temperature', models.DecimalField(decimal_places=1, max_digits=4)),
                ('humidity', models.IntegerField()),
                ('windSpeed', models.DecimalField(decimal_places=1, max_digits=4)),
                ('visibility', models.DecimalField(decimal_places=1, max_digits=4)),
                ('conditions', models.CharField(choices=[('Sunny', 'Sunny'), ('Partly Cloudy', 'Partly Cloudy'), ('Cloudy', 'Cloudy'), ('Light Rain', 'Light Rain')], max_length=32)),
                ('forecast', models.JSONField(default=list)),
                ('lastUpdated', models.DateTimeField(default=django.utils.timezone.now)),
                ('region', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='weather', to='crop_adviser_backend.region')),
            ],
        ),
        migrations.CreateModel(
            name='CropRecommendation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('compatibilityScore', models.IntegerField()),
                ('advice', models.JSONField(default=dict, help_text='irrigation, fertilizer and pestControl advice')),
                ('createdAt', models.DateTimeField(auto_now_add=True)),
                ('crop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='recommendations', to='crop_adviser_backend.crop')),
                ('region', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='recommendations', to='crop_adviser_backend.region')),
                ('soilType', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='recommendations', to='crop_adviser_backend.soiltype')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cropRecommendations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-compatibilityScore', 'crop__name'],
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'crop'), name='unique_recommendation_per_user_and_crop'),
                    models.CheckConstraint(condition=models.Q(('compatibilityScore__gte', 50), ('compatibilityScore__lte', 99)), name='compatibility_score_range'),
                ],
            },
        ),
    ]
