"""URL routing for the portal API + the local storage stub.


The /api/ namespace exposes the portal screens as JSON; /stub/storage/ exposes
the key-value store that holds the portal document.
"""

from django.contrib import admin
from django.urls import path, include


urlpatterns = [
	path("admin/", admin.site.urls),
	path("api/", include("api.urls")),
	path("stub/storage/", include("storage_stub.urls")),
]
