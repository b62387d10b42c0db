from django.contrib import admin

from scheduling.models import Package, PackageItem, Procedure


class PackageItemInline(admin.TabularInline):
    model = PackageItem
    extra = 1
    fk_name = "package"


@admin.register(Procedure)
class ProcedureAdmin(admin.ModelAdmin):
    list_display = [
        "name",
        "recommended_session_count",
        "estimated_session_minutes",
        "session_interval",
    ]
    search_fields = ["name"]


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]
    inlines = [PackageItemInline]
