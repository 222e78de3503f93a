"""
Management command to clear the stored portal document.
"""
from django.core.management.base import BaseCommand

from core.store import PersistentStore


class Command(BaseCommand):
	help = 'Delete the stored portal document (the next request seeds a new one)'

	def add_arguments(self, parser):
		parser.add_argument(
			'--key',
			default=None,
			help='Storage key to clear (defaults to PORTAL_STORAGE_KEY)',
		)
		parser.add_argument(
			'--seed',
			action='store_true',
			help='Write a fresh seed document right away',
		)

	def handle(self, *args, **options):
		store = PersistentStore(key=options['key'])
		store.reset()
		self.stdout.write(self.style.WARNING(f'Cleared {store.key}'))

		if options['seed']:
			document = store.load()
			self.stdout.write(
				self.style.SUCCESS(f'Seeded {store.key} at {document.created_at}')
			)
