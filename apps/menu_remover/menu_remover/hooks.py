app_name = "menu_remover"
app_title = "Menu Remover"
app_publisher = "EchoPx"
app_description = "Remove Order list, Shipments, Files and Calendar from the client portal, customise the Omni Sales storefront and send clients there after login"
app_email = "support@echopx.com"
app_license = "mit"

# ──────────────────────────────────────────────────────────────────────────────
# Installation
# ──────────────────────────────────────────────────────────────────────────────

after_install = "menu_remover.install.after_install"
before_uninstall = "menu_remover.install.before_uninstall"

# ──────────────────────────────────────────────────────────────────────────────
# Request pipeline: storefront redirects + quantity clamp
# (must stay first so a redirect short-circuits everything else)
# ──────────────────────────────────────────────────────────────────────────────

before_request = ["menu_remover.api.request_hooks.before_request"]

# ──────────────────────────────────────────────────────────────────────────────
# Login: land on the storefront, and arm the one-shot redirect in case the
# login response's home_page gets overridden
# ──────────────────────────────────────────────────────────────────────────────

get_website_user_home_page = "menu_remover.api.request_hooks.get_website_user_home_page"
on_session_creation = "menu_remover.api.request_hooks.on_session_creation"

# ──────────────────────────────────────────────────────────────────────────────
# Portal pages: filter sidebar menu + inject CSS/JS fallback into <head>
# ──────────────────────────────────────────────────────────────────────────────

update_website_context = ["menu_remover.api.portal.update_website_context"]

# ──────────────────────────────────────────────────────────────────────────────
# Desk
# ──────────────────────────────────────────────────────────────────────────────

boot_session = "menu_remover.api.admin.boot_session"
