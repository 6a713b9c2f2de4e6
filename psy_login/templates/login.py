
LOGIN_TEMPLATE = """
<div class="min-h-full flex items-center justify-center py-12 px-4 sm:px-6 lg:px-8">
  <div class="max-w-md w-full space-y-8">
    <div class="text-center">
      <div class="flex justify-center">
        <div class="bg-blue-100 p-3 rounded-full">
          <i class="fas fa-brain text-blue-600 text-4xl"></i>
        </div>
      </div>
      <h2 class="mt-6 text-3xl font-extrabold text-gray-900">Вход в систему</h2>
      <p class="mt-2 text-sm text-gray-600">{{ app_name }}</p>
    </div>

    <form id="login-form" class="mt-8 space-y-6" action="{{ login_url }}" method="POST">
      {{ csrf_field }}

      {% for banner in banners %}
      {% set style = banner_styles[banner.level] %}
      <div class="rounded-md {{ style.box }} p-4 alert-auto-close" data-banner="{{ banner.kind }}" role="alert">
        <div class="flex">
          <div class="flex-shrink-0">
            <i class="fas {{ style.icon }}"></i>
          </div>
          <div class="ml-3 flex-1">
            <h3 class="text-sm font-medium {{ style.title }}">{{ banner.title }}</h3>
            <div class="mt-2 text-sm {{ style.text }}">
              <p>{{ banner.message }}</p>
            </div>
          </div>
          <button type="button" class="ml-3 text-gray-400 hover:text-gray-600 dismiss-alert" aria-label="Закрыть">
            <i class="fas fa-times"></i>
          </button>
        </div>
      </div>
      {% endfor %}

      <div class="rounded-md shadow-sm -space-y-px">
        <div>
          <label for="username" class="sr-only">Имя пользователя или ID психолога</label>
          <div class="relative">
            <div class="absolute inset-y-0 left-0 pl-3 flex items-center pointer-events-none">
              <i class="fas fa-user text-gray-400"></i>
            </div>
            <input id="username"
                   name="username"
                   type="text"
                   value="{{ vm.username or '' }}"
                   required
                   class="appearance-none rounded-none relative block w-full px-3 py-3 pl-10 border border-gray-300 placeholder-gray-500 text-gray-900 rounded-t-md focus:outline-none focus:ring-blue-500 focus:border-blue-500 focus:z-10 sm:text-sm{% if 'username' in vm.field_errors %} border-red-300{% endif %}"
                   placeholder="Имя пользователя или ID психолога">
          </div>
          {% if 'username' in vm.field_errors %}
          <p class="mt-1 text-sm text-red-600 field-error" data-field="username">{{ vm.field_errors['username'] }}</p>
          {% endif %}
        </div>

        <div>
          <label for="password" class="sr-only">Пароль</label>
          <div class="relative">
            <div class="absolute inset-y-0 left-0 pl-3 flex items-center pointer-events-none">
              <i class="fas fa-lock text-gray-400"></i>
            </div>
            <input id="password"
                   name="password"
                   type="password"
                   value=""
                   required
                   autocomplete="current-password"
                   class="appearance-none rounded-none relative block w-full px-3 py-3 pl-10 border border-gray-300 placeholder-gray-500 text-gray-900 rounded-b-md focus:outline-none focus:ring-blue-500 focus:border-blue-500 focus:z-10 sm:text-sm{% if 'password' in vm.field_errors %} border-red-300{% endif %}"
                   placeholder="Пароль">
            <button id="toggle-password" type="button" class="absolute inset-y-0 right-0 pr-3 flex items-center toggle-password" aria-label="Показать пароль">
              <i class="fas fa-eye text-gray-400 hover:text-gray-600"></i>
            </button>
          </div>
          {% if 'password' in vm.field_errors %}
          <p class="mt-1 text-sm text-red-600 field-error" data-field="password">{{ vm.field_errors['password'] }}</p>
          {% endif %}
        </div>
      </div>

      <div class="flex items-center justify-between">
        <div class="flex items-center">
          <input id="remember" name="remember" type="checkbox" class="h-4 w-4 text-blue-600 focus:ring-blue-500 border-gray-300 rounded">
          <label for="remember" class="ml-2 block text-sm text-gray-900">Запомнить меня</label>
        </div>
        <div class="text-sm">
          <a href="{{ forgot_password_url }}" class="font-medium text-blue-600 hover:text-blue-500">Забыли пароль?</a>
        </div>
      </div>

      <div>
        <button id="login-submit" type="submit" class="group relative w-full flex justify-center py-3 px-4 border border-transparent text-sm font-medium rounded-md text-white bg-blue-600 hover:bg-blue-700 focus:outline-none focus:ring-2 focus:ring-offset-2 focus:ring-blue-500">
          <span class="absolute left-0 inset-y-0 flex items-center pl-3">
            <i class="fas fa-sign-in-alt text-blue-500 group-hover:text-blue-400"></i>
          </span>
          Войти в систему
        </button>
      </div>

      <div class="rounded-md bg-gray-50 p-4">
        <div class="flex">
          <div class="flex-shrink-0">
            <i class="fas fa-info-circle text-gray-400"></i>
          </div>
          <div class="ml-3">
            <h3 class="text-sm font-medium text-gray-800">Информация для входа</h3>
            <div class="mt-2 text-sm text-gray-700">
              <p>Для входа используйте:</p>
              <ul class="list-disc list-inside mt-1 space-y-1">
                <li>Ваш ID психолога (например: 1001)</li>
                <li>Или ваш email адрес</li>
                <li>И пароль, выданный администратором</li>
              </ul>
            </div>
          </div>
        </div>
      </div>
    </form>

    <div class="text-center">
      <p class="text-sm text-gray-600">
        Нет доступа к системе?
        <a id="demo-login" href="#" class="font-medium text-blue-600 hover:text-blue-500 demo-login">Попробовать демо-версию</a>
      </p>
    </div>
  </div>
</div>

<div id="demo-modal" class="fixed z-10 inset-0 overflow-y-auto hidden" data-demo-backdrop>
  <div class="flex items-end justify-center min-h-screen pt-4 px-4 pb-20 text-center sm:block sm:p-0" data-demo-backdrop>
    <div class="fixed inset-0 bg-gray-500 bg-opacity-75 transition-opacity" aria-hidden="true" data-demo-backdrop></div>

    <div id="demo-modal-content" class="inline-block align-bottom bg-white rounded-lg text-left overflow-hidden shadow-xl transform transition-all sm:my-8 sm:align-middle sm:max-w-lg sm:w-full" role="dialog" aria-modal="true">
      <div class="bg-white px-4 pt-5 pb-4 sm:p-6 sm:pb-4">
        <div class="sm:flex sm:items-start">
          <div class="mx-auto flex-shrink-0 flex items-center justify-center h-12 w-12 rounded-full bg-blue-100 sm:mx-0 sm:h-10 sm:w-10">
            <i class="fas fa-eye text-blue-600"></i>
          </div>
          <div class="mt-3 text-center sm:mt-0 sm:ml-4 sm:text-left">
            <h3 class="text-lg leading-6 font-medium text-gray-900">Демо-доступ</h3>
            <div class="mt-2">
              <p class="text-sm text-gray-500">
                Вы можете войти в демо-режим для ознакомления с системой.
                Демо-режим имеет ограниченный функционал и доступен на {{ demo_minutes }} минут.
              </p>
              <div class="mt-4 bg-gray-50 p-4 rounded-lg">
                <div class="grid grid-cols-2 gap-4">
                  <div>
                    <p class="text-sm font-medium text-gray-700">Логин:</p>
                    <p class="text-sm text-gray-900 font-mono mt-1">{{ demo_username }}</p>
                  </div>
                  <div>
                    <p class="text-sm font-medium text-gray-700">Пароль:</p>
                    <p class="text-sm text-gray-900 font-mono mt-1">{{ demo_password }}</p>
                  </div>
                </div>
              </div>
              <p class="text-xs text-gray-500 mt-4">
                <i class="fas fa-exclamation-triangle mr-1"></i>
                Все изменения в демо-режиме будут сброшены после выхода.
              </p>
            </div>
          </div>
        </div>
      </div>
      <div class="bg-gray-50 px-4 py-3 sm:px-6 sm:flex sm:flex-row-reverse">
        <button id="demo-login-btn" type="button" class="w-full inline-flex justify-center rounded-md border border-transparent shadow-sm px-4 py-2 bg-blue-600 text-base font-medium text-white hover:bg-blue-700 sm:ml-3 sm:w-auto sm:text-sm">
          Войти в демо-режим
        </button>
        <button id="close-demo-modal" type="button" class="mt-3 w-full inline-flex justify-center rounded-md border border-gray-300 shadow-sm px-4 py-2 bg-white text-base font-medium text-gray-700 hover:bg-gray-50 sm:mt-0 sm:ml-3 sm:w-auto sm:text-sm">
          Отмена
        </button>
      </div>
    </div>
  </div>
</div>

<script>
(function () {
  const CONFIG = {{ client_config|tojson }};

  const form = document.getElementById("login-form");
  const username = document.getElementById("username");
  const password = document.getElementById("password");
  const remember = document.getElementById("remember");
  const submit = document.getElementById("login-submit");
  const toggle = document.getElementById("toggle-password");
  const modal = document.getElementById("demo-modal");

  const state = { passwordVisible: false, demoModalOpen: false };

  function notify(message, level) {
    window.showNotification(message, level);
  }

  function setModalOpen(open) {
    state.demoModalOpen = open;
    modal.classList.toggle("hidden", !open);
  }

  toggle.addEventListener("click", function () {
    state.passwordVisible = !state.passwordVisible;
    password.type = state.passwordVisible ? "text" : "password";
    const icon = toggle.querySelector("i");
    icon.classList.toggle("fa-eye", !state.passwordVisible);
    icon.classList.toggle("fa-eye-slash", state.passwordVisible);
  });

  document.getElementById("demo-login").addEventListener("click", function (e) {
    e.preventDefault();
    setModalOpen(true);
  });

  document.getElementById("close-demo-modal").addEventListener("click", function () {
    if (state.demoModalOpen) setModalOpen(false);
  });

  modal.addEventListener("click", function (e) {
    if (state.demoModalOpen && e.target.hasAttribute("data-demo-backdrop")) {
      setModalOpen(false);
    }
  });

  document.getElementById("demo-login-btn").addEventListener("click", function () {
    if (!state.demoModalOpen) return;
    username.value = CONFIG.demoUsername;
    password.value = CONFIG.demoPassword;
    remember.checked = true;
    setModalOpen(false);
    submit.focus();
    setTimeout(function () {
      notify(CONFIG.messages.demoFilled, "info");
    }, CONFIG.demoNoticeDelayMs);
  });

  setTimeout(function () {
    if (!username.value) {
      username.focus();
    } else {
      password.focus();
    }
  }, CONFIG.autofocusDelayMs);

  username.addEventListener("keydown", function (e) {
    if (e.key !== "Enter") return;
    e.preventDefault();
    password.focus();
  });

  password.addEventListener("keydown", function (e) {
    if (e.key !== "Enter") return;
    e.preventDefault();
    if (form.requestSubmit) {
      form.requestSubmit(submit);
    } else {
      form.submit();
    }
  });

  let storage = null;
  try {
    storage = window.localStorage;
  } catch (err) {
    storage = null;
  }
  if (!window.Promise || !window.fetch || !storage) {
    notify(CONFIG.messages.outdatedBrowser, "warning");
  }
})();
</script>

<style>
.toggle-password { cursor: pointer; outline: none; }
.toggle-password:focus { outline: 2px solid #3b82f6; outline-offset: 2px; }
#demo-modal { animation: fadeIn 0.3s ease-out; }
@keyframes fadeIn { from { opacity: 0; } to { opacity: 1; } }
.alert-auto-close { animation: slideDown 0.3s ease-out; }
@keyframes slideDown {
  from { transform: translateY(-10px); opacity: 0; }
  to { transform: translateY(0); opacity: 1; }
}
input:focus, button:focus { outline: 2px solid #3b82f6; outline-offset: 2px; }
</style>
"""
