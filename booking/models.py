from django.contrib.auth import get_user_model
from django.db import models
from django.db.models import ForeignKey, Q, F

from hotel.models import Hotel


class Booking(models.Model):
    hotel = ForeignKey(Hotel, on_delete=models.CASCADE, related_name="bookings")
    user = ForeignKey(get_user_model(), on_delete=models.CASCADE,
                      related_name="bookings")
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.EmailField()
    adult_count = models.PositiveIntegerField()
    child_count = models.PositiveIntegerField(default=0)
    check_in = models.DateField()
    check_out = models.DateField()
    total_cost = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        ordering = ("id",)
        constraints = [
            models.CheckConstraint(
                condition=Q(check_out__gt=F("check_in")),
                name="check_out_after_check_in",
            ),
        ]

    def __str__(self):
        return f"{self.hotel_id}: {self.check_in} - {self.check_out}"
