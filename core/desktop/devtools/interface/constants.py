"""Interface-level constants for the taskdash CLI/TUI."""


LANG_PACK = {
    "en": {
        "APP_TITLE": "Todo App",
        "WELCOME": "Welcome, {name}",
        "NOTIFY_CREATE_OK": "Task created successfully!",
        "NOTIFY_CREATE_FAIL": "Failed to create task",
        "NOTIFY_UPDATE_OK": "Task updated successfully!",
        "NOTIFY_UPDATE_FAIL": "Failed to update task",
        "NOTIFY_DELETE_OK": "Task deleted successfully!",
        "NOTIFY_DELETE_FAIL": "Failed to delete task",
        "NOTIFY_LOGGED_OUT": "Logged out",
        "PAGE_LABEL": "Page {page} of {total}",
        "BTN_PREVIOUS": "◀ Previous",
        "BTN_NEXT": "Next ▶",
        "BTN_RETRY": "Retry",
        "BTN_LOGOUT": "Logout",
        "SEARCH_LABEL": "Search",
        "FORM_TITLE": "Title",
        "FORM_DESCRIPTION": "Description",
        "FORM_HEADER": "Create New Task",
        "LIST_HEADER": "Your Tasks",
        "EMPTY_TITLE": "No tasks",
        "EMPTY_HINT": "Get started by creating a new task.",
        "LOADING": "Loading dashboard...",
        "ERROR_TITLE": "Error Loading Dashboard",
        "ERROR_FALLBACK": "Failed to load tasks. Please try again.",
        "LOGIN_HEADER": "Sign in",
        "REGISTER_HEADER": "Create account",
        "FIELD_NAME": "Name",
        "FIELD_EMAIL": "Email",
        "FIELD_PASSWORD": "Password",
        "AUTH_FAILED": "Authentication failed",
        "AUTH_REQUIRED": "Not logged in. Run `taskdash login` first.",
        "LOGIN_OK": "Logged in as {email}",
        "REGISTER_OK": "Registered as {email}",
        "CONFIG_SAVED": "Configuration saved",
        "HINT_DASHBOARD": "Tab focus · Enter toggle/submit · x delete · [ ] page · F5 retry · ^L logout · ^Q quit",
        "HINT_AUTH": "Tab next field · Enter submit · F2 switch login/register · ^Q quit",
    },
    "ru": {
        "APP_TITLE": "Список задач",
        "WELCOME": "Привет, {name}",
        "NOTIFY_CREATE_OK": "Задача создана!",
        "NOTIFY_CREATE_FAIL": "Не удалось создать задачу",
        "NOTIFY_UPDATE_OK": "Задача обновлена!",
        "NOTIFY_UPDATE_FAIL": "Не удалось обновить задачу",
        "NOTIFY_DELETE_OK": "Задача удалена!",
        "NOTIFY_DELETE_FAIL": "Не удалось удалить задачу",
        "NOTIFY_LOGGED_OUT": "Вы вышли",
        "PAGE_LABEL": "Страница {page} из {total}",
        "BTN_PREVIOUS": "◀ Назад",
        "BTN_NEXT": "Вперёд ▶",
        "BTN_RETRY": "Повторить",
        "BTN_LOGOUT": "Выйти",
        "SEARCH_LABEL": "Поиск",
        "FORM_TITLE": "Название",
        "FORM_DESCRIPTION": "Описание",
        "FORM_HEADER": "Новая задача",
        "LIST_HEADER": "Ваши задачи",
        "EMPTY_TITLE": "Задач нет",
        "EMPTY_HINT": "Создайте первую задачу.",
        "LOADING": "Загрузка...",
        "ERROR_TITLE": "Ошибка загрузки",
        "ERROR_FALLBACK": "Не удалось загрузить задачи. Попробуйте ещё раз.",
        "LOGIN_HEADER": "Вход",
        "REGISTER_HEADER": "Регистрация",
        "FIELD_NAME": "Имя",
        "FIELD_EMAIL": "Email",
        "FIELD_PASSWORD": "Пароль",
        "AUTH_FAILED": "Ошибка аутентификации",
        "AUTH_REQUIRED": "Нет сессии. Выполните `taskdash login`.",
    },
}
