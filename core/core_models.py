# core/core_models.py
from django.db import models

from core.passwords import hash_password, check_password


# -------------------------
# Users
# -------------------------
class User(models.Model):
    ROLE_USER = "user"
    ROLE_ENGINEER = "engineer"
    ROLE_ADMIN = "admin"
    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ENGINEER, "Engineer"),
        (ROLE_ADMIN, "Admin"),
    ]

    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=150)
    username = models.CharField(max_length=150, unique=True)  # stored lower-cased
    email = models.EmailField(max_length=254, unique=True)  # stored lower-cased
    password = models.CharField(max_length=128)  # bcrypt hash
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Plain secret staged by set_password(); never persisted.
    _pending_password = None

    class Meta:
        db_table = "users"

    def __str__(self):
        return f"{self.username} ({self.role})"

    def set_password(self, raw_password: str):
        """Stage a new secret. It is hashed by save(), not here."""
        self._pending_password = raw_password

    def hash_pending_password(self) -> bool:
        """
        Pre-write hook: hash a staged secret exactly once.
        Returns False (and leaves the stored hash alone) when nothing is staged.
        """
        if self._pending_password is None:
            return False
        self.password = hash_password(self._pending_password)
        self._pending_password = None
        return True

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)

    def save(self, *args, **kwargs):
        self.hash_pending_password()
        super().save(*args, **kwargs)


# -------------------------
# Complaints
# -------------------------
class Complaint(models.Model):
    id = models.AutoField(primary_key=True)
    submitted_by = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="complaints", db_column="submitted_by"
    )
    # Submitter details captured at submission time
    name = models.CharField(max_length=150)
    email = models.EmailField(max_length=254)
    contact = models.CharField(max_length=50)
    desc = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "complaints"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Complaint {self.id} - {self.name}"


# -------------------------
# Complaint → engineer mapping
# -------------------------
class ComplaintMapping(models.Model):
    id = models.AutoField(primary_key=True)
    complaint = models.ForeignKey(
        Complaint, on_delete=models.CASCADE, related_name="mappings", db_column="complaint_id"
    )
    engineer_name = models.CharField(max_length=150, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "complaint_mappings"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Complaint {self.complaint_id} → {self.engineer_name}"
