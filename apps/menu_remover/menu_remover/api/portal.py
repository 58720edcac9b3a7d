# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Portal page hooks: sidebar filtering and <head> injection.
"""

import frappe

from menu_remover.assets import render_head_include
from menu_remover.audit import log_removed_menu
from menu_remover.config import get_settings
from menu_remover.navigation import filter_navigation, portal_slug


def update_website_context(context):
	"""
	Hook: update_website_context.

	Removes blocked items from ``sidebar_items`` and appends the clean-up
	CSS/JS to ``head_include``.
	"""
	settings = get_settings()

	if context.get("sidebar_items"):
		context["sidebar_items"] = filter_navigation(
			context["sidebar_items"],
			settings.blocked_slugs,
			slug_of=portal_slug,
			on_remove=log_removed_menu,
		)

	try:
		head = render_head_include(settings, context.get("path") or _request_path())
	except Exception:
		frappe.log_error("Menu Remover: failed to render portal head include")
		return

	if head:
		context["head_include"] = (context.get("head_include") or "") + head


def get_portal_menu():
	"""Enabled items of the Portal Settings menu, standard and custom."""
	portal = frappe.get_cached_doc("Portal Settings")
	rows = list(portal.get("menu") or []) + list(portal.get("custom_menu") or [])
	return [row.as_dict() for row in rows if row.get("enabled")]


def _request_path():
	request = getattr(frappe.local, "request", None)
	return (request.path or "").strip("/") if request is not None else ""
