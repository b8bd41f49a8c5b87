from .settings import *  # noqa: F401,F403

DATABASES = {
	'default': {
		'ENGINE': 'django.db.backends.sqlite3',
		'NAME': ':memory:',
	}
}

GEMINI_API_KEY = ''
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
CORS_ALLOWED_ORIGINS = ['http://localhost:5173']
CORS_ALLOW_ALL_ORIGINS = False
