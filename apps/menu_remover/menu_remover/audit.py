# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

import frappe


LOGGER_NAME = "menu_remover"


def log_activity(message):
	"""Write an audit line to the site's menu_remover log. Never raises."""
	try:
		frappe.logger(LOGGER_NAME, allow_site=True).info(f"Menu Remover: {message}")
	except Exception:
		pass


def log_removed_menu(slug):
	log_activity(f"Removed menu item - {slug}")
