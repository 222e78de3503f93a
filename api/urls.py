"""Public API surface for the portal.

- /info, /pay, /me: read-only screens
- /register, /login, /logout, /topup: user actions
- /pay/simulate: the "I have paid" button (simulated UPI confirmation)
- /admin/*: session-gated administrator actions
"""

from django.urls import path
from .views_demo import simulate_payment
from .views_ops import health, csrf, register, login, logout, topup, admin_login, admin_credit, admin_remove
from .views_read import info, pay, me, admin_users


urlpatterns = [
	path("health", health),
	path("csrf", csrf),
	path("info", info),
	path("register", register),
	path("login", login),
	path("logout", logout),
	path("me", me),
	path("pay", pay),
	path("pay/simulate", simulate_payment),
	path("topup", topup),
	path("admin/login", admin_login),
	path("admin/logout", logout),
	path("admin/users", admin_users),
	path("admin/credit", admin_credit),
	path("admin/remove", admin_remove),
]
