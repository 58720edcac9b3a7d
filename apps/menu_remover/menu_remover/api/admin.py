# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Desk-side visibility for System Managers.
"""

import frappe

from menu_remover.api.portal import get_portal_menu
from menu_remover.config import get_settings
from menu_remover.navigation import filter_navigation, portal_slug


def boot_session(bootinfo):
	"""Hook: boot_session. Tells admins that client menu filtering is active."""
	if "System Manager" not in frappe.get_roles():
		return

	settings = get_settings()
	bootinfo.menu_remover = {
		"active": True,
		"blocked_slugs": sorted(settings.blocked_slugs),
		"redirect_target": settings.redirect_target,
	}


@frappe.whitelist()
def get_navigation_report():
	"""
	Debug view of the client portal menu: what exists, what survives
	the block-list and which slugs are blocked.
	"""
	frappe.only_for("System Manager")

	settings = get_settings()
	menu = get_portal_menu()
	kept = filter_navigation(menu, settings.blocked_slugs, slug_of=portal_slug)
	kept_ids = {id(item) for item in kept}

	return {
		"menu": menu,
		"kept": kept,
		"removed": [item for item in menu if id(item) not in kept_ids],
		"blocked_slugs": sorted(settings.blocked_slugs),
	}
