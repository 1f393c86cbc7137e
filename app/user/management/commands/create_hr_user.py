"""
최초 HR 계정을 만드는 관리 커맨드.

회원가입을 막아 둔 환경(AUTH_REGISTRATION_ENABLED=false)에서 첫 계정을 만들 때 사용합니다.
"""

from django.core.management.base import BaseCommand, CommandError
from user.models import User
from user.serializers import PASSWORD_MIN_LENGTH


class Command(BaseCommand):
    help = "Creates an HR (or admin) user that can log in to the job board."

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True, help="Login email.")
        parser.add_argument("--password", required=True, help="Initial password.")
        parser.add_argument("--name", default="", help="Display name.")
        parser.add_argument(
            "--admin",
            action="store_true",
            help="Create the account with the admin role and Django admin access.",
        )

    def handle(self, *args, **options):
        email = options["email"].strip().lower()
        password = options["password"]

        if len(password) < PASSWORD_MIN_LENGTH:
            raise CommandError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
            )
        if User.objects.filter(email=email).exists():
            raise CommandError(f"User {email} already exists.")

        if options["admin"]:
            user = User.objects.create_superuser(
                email=email, password=password, name=options["name"]
            )
        else:
            user = User.objects.create_user(
                email=email, password=password, name=options["name"]
            )

        self.stdout.write(
            self.style.SUCCESS(f"Created {user.role} user {user.email} (id={user.pk})")
        )
