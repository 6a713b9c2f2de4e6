import os

APP_NAME = "Система управления психологическими данными"
APP_VERSION = "1.0.0"

# ============================
# DEPLOYMENT SETTINGS
# ============================
SECRET_KEY = os.environ.get("SECRET_KEY", "")
APP_ENV = os.environ.get("APP_ENV", "development")

AUTH_API_URL = os.environ.get("AUTH_API_URL", "http://127.0.0.1:8000/api/auth")
AUTH_API_TIMEOUT = float(os.environ.get("AUTH_API_TIMEOUT", "5"))

LOGIN_URL = "/login"
LOGIN_REDIRECT_URL = os.environ.get("LOGIN_REDIRECT_URL", "/dashboard")
FORGOT_PASSWORD_URL = "/forgot-password"

LOG_FILE = os.environ.get("LOG_FILE", "app.log")

# ============================
# LOGIN PAGE
# ============================
# Query parameters that raise a status banner, in display order.
QUERY_FLAGS = ("expired", "logged_out", "registered")
QUERY_FLAG_ON = "1"

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6

DEMO_USERNAME = "demo_user"
DEMO_PASSWORD = "demo123"
DEMO_SESSION_MINUTES = 30

# Client-side delays, milliseconds
AUTOFOCUS_DELAY_MS = 100
DEMO_NOTICE_DELAY_MS = 300
BANNER_AUTO_CLOSE_MS = 5000
NOTIFICATION_TTL_MS = 5000

MESSAGES = {
    "username_required": "Имя пользователя обязательно для заполнения",
    "username_too_short": f"Имя пользователя должно содержать не менее {USERNAME_MIN_LENGTH} символов",
    "username_too_long": f"Имя пользователя должно содержать не более {USERNAME_MAX_LENGTH} символов",
    "password_required": "Пароль обязателен для заполнения",
    "password_too_short": f"Пароль должен содержать не менее {PASSWORD_MIN_LENGTH} символов",
    "invalid_credentials": "Неверное имя пользователя или пароль",
    "login_failed": "Произошла ошибка при входе. Пожалуйста, попробуйте позже.",
    "csrf_failed": "Недействительный токен безопасности. Пожалуйста, обновите страницу.",
    "demo_filled": 'Форма заполнена демо-данными. Нажмите "Войти в систему".',
    "outdated_browser": "Ваш браузер устарел. Некоторые функции могут работать некорректно.",
}

# Fixed copy of the status banners. (title, message, level)
ERROR_BANNER_TITLE = "Ошибка входа"
FLAG_BANNERS = {
    "expired": (
        "Сессия истекла",
        "Пожалуйста, войдите снова для продолжения работы.",
        "warning",
    ),
    "logged_out": (
        "Выход выполнен",
        "Вы успешно вышли из системы.",
        "success",
    ),
    "registered": (
        "Регистрация успешна",
        "Теперь вы можете войти в систему с вашими учетными данными.",
        "success",
    ),
}

BANNER_STYLES = {
    "error": {"box": "bg-red-50", "icon": "fa-exclamation-circle text-red-400",
              "title": "text-red-800", "text": "text-red-700"},
    "warning": {"box": "bg-yellow-50", "icon": "fa-exclamation-triangle text-yellow-400",
                "title": "text-yellow-800", "text": "text-yellow-700"},
    "success": {"box": "bg-green-50", "icon": "fa-check-circle text-green-400",
                "title": "text-green-800", "text": "text-green-700"},
}
