# core/core_models.py
from django.db import models

# -------------------------
# Users
# -------------------------
class User(models.Model):
    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    occupation = models.CharField(max_length=255, blank=True, null=True)
    newsletter = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.name} ({self.id})"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "occupation": self.occupation,
            "newsletter": self.newsletter,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


# -------------------------
# Addresses
# -------------------------
class Address(models.Model):
    id = models.BigAutoField(primary_key=True)
    street = models.CharField(max_length=255)
    number = models.CharField(max_length=255, blank=True, null=True)
    city = models.CharField(max_length=255)
    # Owned by User; rows are removed before their owner (see queries.delete_user)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="addresses")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "addresses"

    def __str__(self):
        return f"{self.street}, {self.number or 's/n'} - {self.city}"

    def to_dict(self):
        return {
            "id": self.id,
            "street": self.street,
            "number": self.number,
            "city": self.city,
            "user_id": self.user_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
