"""Django settings for the Print Portal prototype.


This project runs the retailer/distributor onboarding flow:
- Register an account (retailer ₹199, distributor ₹499) → pending
- Recharge the wallet through a UPI link (simulated confirmation) → active
- Admin credits or removes accounts


The whole portal state is one JSON document kept in the storage_stub key-value
table. Credentials are compared in plain text; this is a prototype.
"""

import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = os.getenv("DEBUG", "1") in ("1", "true", "True", "yes")
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "*").split(",")
CSRF_TRUSTED_ORIGINS = os.getenv("CSRF_TRUSTED_ORIGINS", "").split(",") if os.getenv("CSRF_TRUSTED_ORIGINS") else []

def env_bool(name, default=""):
    v = os.getenv(name, default)
    return v.lower() in ("1", "true", "yes", "on")

#######################
# Storage key of the portal document (browser localStorage key in the prototype)
PORTAL_STORAGE_KEY = os.getenv("PORTAL_STORAGE_KEY", "print_portal_data_v1")

# Seed administrator, written into the document the first time it is created
PORTAL_ADMIN_USERNAME = os.getenv("PORTAL_ADMIN_USERNAME", "admin")
PORTAL_ADMIN_PASSWORD = os.getenv("PORTAL_ADMIN_PASSWORD", "admin123")

# Unparseable stored document: raise CorruptData (default) or replace it with a fresh seed
PORTAL_RESEED_ON_CORRUPT = env_bool("PORTAL_RESEED_ON_CORRUPT", "0")

# Registration prices in whole rupees, fixed on the account at creation time
ACCOUNT_PRICES = {
    "retailer": int(os.getenv("RETAILER_PRICE", "199")),
    "distributor": int(os.getenv("DISTRIBUTOR_PRICE", "499")),
}

# Largest single top-up or admin credit, in whole rupees
MAX_TOPUP = int(os.getenv("MAX_TOPUP", "1000000"))

# Outbound UPI deep link
UPI_MERCHANT_ID = os.getenv("UPI_MERCHANT_ID", "7033151758-3@ybl")
UPI_PAYEE_NAME = os.getenv("UPI_PAYEE_NAME", "PrintPortal")
SUPPORT_WHATSAPP = os.getenv("SUPPORT_WHATSAPP", "7070838282")
#######################


INSTALLED_APPS = [
	"django.contrib.admin",
	"django.contrib.auth",
	"django.contrib.contenttypes",
	"django.contrib.sessions",
	"django.contrib.messages",
	"django.contrib.staticfiles",
	# local apps
	"core",
	"api",
	"storage_stub",
]


MIDDLEWARE = [
	"django.middleware.security.SecurityMiddleware",
	"django.contrib.sessions.middleware.SessionMiddleware",
	"django.middleware.common.CommonMiddleware",
	"django.middleware.csrf.CsrfViewMiddleware",
	"django.contrib.auth.middleware.AuthenticationMiddleware",
	"django.contrib.messages.middleware.MessageMiddleware",
]


ROOT_URLCONF = "print_portal.urls"
TEMPLATES = [
	{
		"BACKEND": "django.template.backends.django.DjangoTemplates",
		"DIRS": [],
		"APP_DIRS": True,
		"OPTIONS": {
			"context_processors": [
				"django.template.context_processors.debug",
				"django.template.context_processors.request",
				"django.contrib.auth.context_processors.auth",
				"django.contrib.messages.context_processors.messages",
			],
		},
	},
]


WSGI_APPLICATION = "print_portal.wsgi.application"


DB_ENGINE = os.getenv("DB_ENGINE", "sqlite")
if DB_ENGINE == "postgres":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("POSTGRES_DB", "print_portal"),
            "USER": os.getenv("POSTGRES_USER", "print_portal"),
            "PASSWORD": os.getenv("POSTGRES_PASSWORD", "print_portal"),
            "HOST": os.getenv("POSTGRES_HOST", "localhost"),
            "PORT": os.getenv("POSTGRES_PORT", "5432"),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }



AUTH_PASSWORD_VALIDATORS = []


LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {"()": "core.utils.logging.JsonFormatter"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "json"},
    },
    "loggers": {
        "core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "api": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "storage_stub": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
