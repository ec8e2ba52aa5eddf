"""Custom user model with profile metadata and role."""

from django.core.validators import RegexValidator, MaxLengthValidator
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Account resolved from the identity provider, plus public profile fields."""

    ROLE_USER = "user"
    ROLE_ADMIN = "admin"

    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Admin"),
    ]

    username = models.CharField(
        max_length=128,
        unique=True,
        validators=[RegexValidator(
            regex=r'^[\w ]{3,}$',
            message='Username must consist of at least three letters, digits, underscores or spaces'
        )]
    )
    first_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50, blank=True)
    email = models.EmailField(unique=True, blank=False)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    avatar = models.CharField(max_length=500, blank=True, null=True)
    is_verified = models.BooleanField(default=False)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)

    class Meta:
        """Default ordering for users."""
        ordering = ['last_name', 'first_name']

    @property
    def is_admin(self):
        """True for accounts allowed to moderate other users' recipes."""
        return self.role == self.ROLE_ADMIN
