
LAYOUT_TEMPLATE = """
<!doctype html>
<html lang="ru" class="h-full bg-gray-50">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{% if page_title %}{{ page_title }} | {% endif %}{{ app_name }}</title>
  <link rel="stylesheet" href="/assets/css/tailwind.min.css?v={{ app_version }}">
  <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css">
  <style>
    .notification { transition: transform .3s ease, opacity .3s ease; }
    .notification.leaving { transform: translateX(120%); opacity: 0; }
  </style>
</head>
<body class="h-full">
  <div id="notifications" class="fixed top-4 right-4 z-50 space-y-2 w-80" aria-live="polite"></div>

<script>
(function () {
  const LEVELS = {
    success: { box: "bg-green-100 border-green-400 text-green-700", icon: "fa-check-circle" },
    error: { box: "bg-red-100 border-red-400 text-red-700", icon: "fa-exclamation-circle" },
    warning: { box: "bg-yellow-100 border-yellow-400 text-yellow-700", icon: "fa-exclamation-triangle" },
    info: { box: "bg-blue-100 border-blue-400 text-blue-700", icon: "fa-info-circle" }
  };
  const TTL_MS = {{ notification_ttl_ms }};

  function closeNotification(el) {
    el.classList.add("leaving");
    setTimeout(function () { el.remove(); }, 300);
  }

  // Message goes in as text, never as markup
  window.showNotification = function (message, level) {
    const style = LEVELS[level] || LEVELS.info;
    const el = document.createElement("div");
    el.className = "notification p-4 rounded-lg border shadow-lg " + style.box;
    el.setAttribute("role", level === "error" || level === "warning" ? "alert" : "status");

    const row = document.createElement("div");
    row.className = "flex items-center";
    const icon = document.createElement("i");
    icon.className = "fas " + style.icon + " mr-3";
    const text = document.createElement("div");
    text.className = "flex-1";
    text.textContent = message;
    const close = document.createElement("button");
    close.type = "button";
    close.className = "ml-4 text-gray-500 hover:text-gray-700";
    close.innerHTML = '<i class="fas fa-times"></i>';
    close.addEventListener("click", function () { closeNotification(el); });

    row.append(icon, text, close);
    el.appendChild(row);
    document.getElementById("notifications").appendChild(el);
    setTimeout(function () { closeNotification(el); }, TTL_MS);
  };
})();
</script>

  {{ content }}

<script>
(function () {
  const BANNER_TTL_MS = {{ banner_auto_close_ms }};

  document.querySelectorAll(".dismiss-alert").forEach(function (btn) {
    btn.addEventListener("click", function () {
      btn.closest(".alert-auto-close").remove();
    });
  });

  setTimeout(function () {
    document.querySelectorAll(".alert-auto-close").forEach(function (el) {
      el.remove();
    });
  }, BANNER_TTL_MS);
})();
</script>
</body>
</html>
"""
