"""Deterministic in-process key-value storage.

Plays the part of the browser's localStorage: one row per key, the value is an
opaque string that is always replaced as a whole.
"""

import uuid
from django.db import models


class StorageItem(models.Model):
	"""
	A single stored key and its serialized value
	"""
	id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
	key = models.CharField(max_length=200, unique=True) # e.g. print_portal_data_v1
	value = models.TextField()
	updated_at = models.DateTimeField(auto_now=True)

	def __str__(self):
		return self.key
