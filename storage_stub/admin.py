from django.contrib import admin

from .models import StorageItem


@admin.register(StorageItem)
class StorageItemAdmin(admin.ModelAdmin):
	list_display = ("key", "updated_at")
	search_fields = ("key",)
