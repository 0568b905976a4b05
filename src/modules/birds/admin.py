from django.contrib import admin

from modules.birds.models import Bird


@admin.register(Bird)
class BirdAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "species", "created_at"]
    search_fields = ["name", "species"]
    readonly_fields = ["created_at", "updated_at"]
