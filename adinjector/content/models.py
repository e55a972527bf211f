from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _


class PublishedManager(models.Manager):
    def get_queryset(self):
        return super().get_queryset().filter(published=True)


class Node(models.Model):
    """A content item displayed to site visitors."""

    title = models.CharField(max_length=255, verbose_name=_("Title"))
    body = models.TextField(blank=True, verbose_name=_("Body"))
    summary = models.TextField(
        blank=True,
        verbose_name=_("Summary"),
        help_text=_("Shown on teaser listings. Leave empty to trim the body."),
    )
    language = models.CharField(
        max_length=12,
        default=settings.LANGUAGE_CODE,
        verbose_name=_("Language"),
    )
    published = models.BooleanField(default=True, verbose_name=_("Published"))
    created = models.DateTimeField(auto_now_add=True)

    objects = models.Manager()
    active = PublishedManager()

    class Meta:
        ordering = ["-created", "-id"]

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("content:node_detail", args=[self.pk])
