from django.contrib import admin

from coordination.models import Event, Item, OperatingHours, StorageCenter, Transaction, Volunteer


class OperatingHoursInline(admin.TabularInline):
    model = OperatingHours
    extra = 1


class ItemInline(admin.TabularInline):
    model = Item
    extra = 1


class TransactionInline(admin.TabularInline):
    model = Transaction
    extra = 0
    can_delete = False
    readonly_fields = ["item", "item_description", "quantity", "reason", "created_at"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(StorageCenter)
class StorageCenterAdmin(admin.ModelAdmin):
    list_display = ["name", "organization_id", "created_at"]
    search_fields = ["name", "description"]
    inlines = [OperatingHoursInline, ItemInline, TransactionInline]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "date", "location", "storage_center", "created_at"]
    list_filter = ["storage_center"]
    search_fields = ["name", "location"]
    filter_horizontal = ["volunteers"]


@admin.register(Volunteer)
class VolunteerAdmin(admin.ModelAdmin):
    list_display = ["name", "role", "join_date"]
    search_fields = ["name", "role"]
