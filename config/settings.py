
from pathlib import Path
import os
from dotenv import load_dotenv


def _env_bool(name: str, default: bool = False) -> bool:
	val = os.getenv(name)
	if val is None:
		return default
	return str(val).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
	val = os.getenv(name)
	if val is None or not str(val).strip():
		return default
	return int(val)


# Choose which env file to load by default.
# - Local/dev: .env
# - Production: production.env
# Can be overridden via ENV_FILE or DJANGO_ENV_FILE.
_bootstrap_env = os.getenv("DJANGO_ENV", "").strip().lower()
_bootstrap_debug = os.getenv("DEBUG")

_default_env_file = ".env"
if _bootstrap_env in ("prod", "production"):
	_default_env_file = "production.env"
elif _bootstrap_debug is not None and str(_bootstrap_debug).strip().lower() in ("0", "false", "no", "off"):
	_default_env_file = "production.env"

ENV_FILE = os.getenv("ENV_FILE", os.getenv("DJANGO_ENV_FILE", _default_env_file))
load_dotenv(ENV_FILE)

# Define the base directory of your project
BASE_DIR = Path(__file__).resolve().parent.parent

# Core settings from environment
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
DEBUG = _env_bool("DEBUG", True)

ALLOWED_HOSTS = [host.strip() for host in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if host.strip()]
CSRF_TRUSTED_ORIGINS = [origin.strip() for origin in os.getenv("CSRF_TRUSTED_ORIGINS", "").split(",") if origin.strip()]

# Browser client origins (the Vite dev server by default)
CORS_ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",") if origin.strip()]
CORS_ALLOW_ALL_ORIGINS = _env_bool("CORS_ALLOW_ALL_ORIGINS", False)

INSTALLED_APPS = [
	'django.contrib.admin', 'django.contrib.auth', 'django.contrib.contenttypes',
	'django.contrib.sessions', 'django.contrib.messages', 'django.contrib.staticfiles',
	'import_export',
	'corsheaders',
	'projects', 'audit', 'dashboards',
]

# Database configuration (default to PostgreSQL)
DATABASES = {
	'default': {
		'ENGINE': os.getenv('DB_ENGINE', 'django.db.backends.postgresql'),
		'NAME': os.getenv('DB_NAME', 'projecttracker'),
		'USER': os.getenv('DB_USER', 'postgres'),
		'PASSWORD': os.getenv('DB_PASSWORD', 'password'),
		'HOST': os.getenv('DB_HOST', 'db' if not DEBUG else 'localhost'),
		'PORT': os.getenv('DB_PORT', '5432'),
	}
}

MIDDLEWARE = [
	'config.middleware.RequestLogMiddleware',
	'corsheaders.middleware.CorsMiddleware',
	'django.middleware.security.SecurityMiddleware',
	'django.contrib.sessions.middleware.SessionMiddleware',
	'django.middleware.common.CommonMiddleware',
	'django.middleware.csrf.CsrfViewMiddleware',
	'django.contrib.auth.middleware.AuthenticationMiddleware',
	'django.contrib.messages.middleware.MessageMiddleware',
	'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

TEMPLATES = [
	{
		'BACKEND': 'django.template.backends.django.DjangoTemplates',
		'DIRS': [],
		'APP_DIRS': True,
		'OPTIONS': {
			'context_processors': [
				'django.template.context_processors.debug',
				'django.template.context_processors.request',
				'django.contrib.auth.context_processors.auth',
				'django.contrib.messages.context_processors.messages',
			],
		},
	},
]
ROOT_URLCONF = 'config.urls'
WSGI_APPLICATION = 'config.wsgi.application'
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# API routes have no trailing slash
APPEND_SLASH = False

# ============================================================================
# PROJECT LISTING / DASHBOARD
# ============================================================================

PROJECTS_DEFAULT_PAGE_SIZE = _env_int('PROJECTS_DEFAULT_PAGE_SIZE', 10)
DASHBOARD_RECENT_LIMIT = _env_int('DASHBOARD_RECENT_LIMIT', 5)

# ============================================================================
# CHAT ASSISTANT (Gemini)
# ============================================================================

GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', '')
GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-2.0-flash')
GEMINI_API_BASE_URL = os.getenv('GEMINI_API_BASE_URL', 'https://generativelanguage.googleapis.com/v1beta')
CHAT_HISTORY_LIMIT = _env_int('CHAT_HISTORY_LIMIT', 10)
CHAT_MAX_OUTPUT_TOKENS = _env_int('CHAT_MAX_OUTPUT_TOKENS', 500)
CHAT_TIMEOUT_SECONDS = _env_int('CHAT_TIMEOUT_SECONDS', 30)

# ============================================================================
# LOGGING
# ============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
	'version': 1,
	'disable_existing_loggers': False,
	'formatters': {
		'standard': {
			'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
		},
	},
	'handlers': {
		'console': {
			'class': 'logging.StreamHandler',
			'formatter': 'standard',
		},
	},
	'root': {
		'handlers': ['console'],
		'level': LOG_LEVEL,
	},
	'loggers': {
		'django': {
			'handlers': ['console'],
			'level': os.getenv('DJANGO_LOG_LEVEL', 'WARNING').upper(),
			'propagate': False,
		},
	},
}

# Locale / TZ defaults
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Security defaults for production
SECURE_SSL_REDIRECT = _env_bool('SECURE_SSL_REDIRECT', False)
SESSION_COOKIE_SECURE = _env_bool('SESSION_COOKIE_SECURE', False)
CSRF_COOKIE_SECURE = _env_bool('CSRF_COOKIE_SECURE', False)
