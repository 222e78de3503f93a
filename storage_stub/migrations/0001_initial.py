import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = []

	operations = [
		migrations.CreateModel(
			name="StorageItem",
			fields=[
				("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
				("key", models.CharField(max_length=200, unique=True)),
				("value", models.TextField()),
				("updated_at", models.DateTimeField(auto_now=True)),
			],
		),
	]
