from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("admin", "Admin"), ("intern", "Intern")], db_index=True, default="intern", max_length=10)),
                ("full_name", models.CharField(blank=True, max_length=255)),
                ("branch", models.CharField(blank=True, choices=[("CSE", "CSE"), ("ECE", "ECE"), ("MECH", "MECH"), ("CIVIL", "CIVIL"), ("MME", "MME"), ("CHEM", "CHEM")], max_length=10)),
                ("year", models.CharField(blank=True, choices=[("E1", "E1"), ("E2", "E2"), ("E3", "E3"), ("E4", "E4")], max_length=2)),
                ("status", models.CharField(choices=[("Active", "Active"), ("Inactive", "Inactive")], default="Active", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["full_name"]},
        ),
    ]
