from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Facility(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ("name",)
        verbose_name_plural = "facilities"

    def __str__(self):
        return self.name


class Hotel(models.Model):
    name = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    country = models.CharField(max_length=255)
    description = models.TextField()
    type = models.CharField(max_length=100)
    adult_count = models.PositiveIntegerField()
    child_count = models.PositiveIntegerField()
    facilities = models.ManyToManyField(
        Facility, related_name="hotels", blank=True
    )
    price_per_night = models.DecimalField(max_digits=10, decimal_places=2)
    star_rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    image_urls = models.JSONField(default=list, blank=True)
    last_updated = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.name} ({self.city}, {self.country})"
