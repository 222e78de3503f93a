"""HTTP endpoints for the storage stub (optional to call directly).

The store adapter uses ORM access for determinism; these endpoints mirror the
getItem / setItem / removeItem calls a browser page would make. The stored
document holds the admin credentials, so both views need an admin session and
writes go through the CSRF check like every other endpoint.
"""

from django.http import HttpResponse, HttpResponseBadRequest, JsonResponse

from api.helpers import admin_required
from .models import StorageItem


@admin_required
def keys(request):
	"""
	GET: All stored keys
	"""
	return JsonResponse(list(StorageItem.objects.order_by("key").values_list("key", flat=True)), safe=False)


@admin_required
def item(request, key: str):
	"""
	GET: raw stored value, PUT: replace it with the request body, DELETE: drop it
	"""
	if request.method == "GET":
		obj = StorageItem.objects.filter(key=key).first()
		if obj is None:
			return JsonResponse({"error": "not_found", "key": key}, status=404)
		return HttpResponse(obj.value, content_type="application/json")

	if request.method == "PUT":
		try:
			value = request.body.decode("utf-8")
		except UnicodeDecodeError:
			return HttpResponseBadRequest("Body must be UTF-8")
		StorageItem.objects.update_or_create(key=key, defaults={"value": value})
		return HttpResponse(status=204)

	if request.method == "DELETE":
		StorageItem.objects.filter(key=key).delete()
		return HttpResponse(status=204)

	return HttpResponseBadRequest("GET, PUT or DELETE only")
