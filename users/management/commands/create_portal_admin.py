from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from users.models import UserProfile

User = get_user_model()


class Command(BaseCommand):
    help = "Create (or promote) a portal admin account."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("--name", default="")
        parser.add_argument("--password", default=None)

    def handle(self, *args, **options):
        email = options["email"].strip().lower()
        if not email:
            raise CommandError("An email address is required.")

        user = User.objects.filter(email__iexact=email).order_by("id").first()
        created = user is None
        if created:
            user = User(username=email, email=email)
        user.is_staff = True
        if options["password"]:
            user.set_password(options["password"])
        elif created:
            user.set_unusable_password()
        user.save()

        profile = user.profile
        profile.role = UserProfile.ROLE_ADMIN
        if options["name"]:
            profile.full_name = options["name"]
        profile.save()

        verb = "Created" if created else "Promoted"
        self.stdout.write(self.style.SUCCESS(f"{verb} portal admin {email}"))
