"""Django signals for catalog cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from scheduling.models import Package, PackageItem, Procedure
from scheduling.stores.django_store import package_cache_key, procedure_cache_key


@receiver([post_save, post_delete], sender=Procedure)
def invalidate_procedure_cache(sender, instance, **kwargs):
    """Invalidate the cached procedure when it is saved or deleted."""
    cache.delete(procedure_cache_key(instance.pk))


@receiver([post_save, post_delete], sender=Package)
def invalidate_package_cache(sender, instance, **kwargs):
    """Invalidate the cached package when it is saved or deleted."""
    cache.delete(package_cache_key(instance.pk))


@receiver(pre_save, sender=PackageItem)
def remember_previous_package(sender, instance, **kwargs):
    """Record the stored package of an item so a move can invalidate it."""
    instance._previous_package_id = (
        sender.objects.filter(pk=instance.pk).values_list("package_id", flat=True).first()
    )


@receiver([post_save, post_delete], sender=PackageItem)
def invalidate_package_item_cache(sender, instance, **kwargs):
    """Invalidate the owning package, and the previous one after a move."""
    package_ids = {instance.package_id, getattr(instance, "_previous_package_id", None)}
    cache.delete_many([package_cache_key(pk) for pk in package_ids if pk is not None])
