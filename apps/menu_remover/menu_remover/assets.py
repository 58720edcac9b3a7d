# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
CSS/JS injected into the <head> of portal pages.

The server-side sidebar filter is the real guarantee; these snippets only
hide whatever a page renders outside of it (theme menus, AJAX-loaded links)
and customise the storefront product pages.
"""

import frappe


MENU_TEMPLATE = "menu_remover/templates/includes/menu_remover_head.html"
STOREFRONT_TEMPLATE = "menu_remover/templates/includes/storefront_head.html"

# Client-side re-scan delays in milliseconds
MENU_RESCAN_DELAYS = (300, 600, 1000)
STOREFRONT_RESCAN_DELAYS = (300, 600, 1000, 1500)

# Containers whose links are matched by label; elsewhere only hrefs are matched
NAV_CONTAINERS = (
	"nav",
	".navbar",
	".sidebar",
	".web-sidebar",
	".sidebar-item",
	".customers-nav",
	'[class*="customers-nav-item"]',
)


def menu_asset_context(blocked_slugs):
	"""Selectors and patterns the menu clean-up snippet needs, derived from the block-list."""
	slugs = sorted(blocked_slugs)
	return {
		"slugs": slugs,
		"href_patterns": sorted({f"clients/{s}" for s in slugs} | {f"/{s}" for s in slugs}),
		"nav_classes": [f"customers-nav-item-{s}" for s in slugs],
		"text_patterns": sorted({s.replace("_", " ") for s in slugs}),
		"nav_containers": ", ".join(NAV_CONTAINERS),
		"rescan_delays": list(MENU_RESCAN_DELAYS),
	}


def storefront_asset_context(settings):
	return {
		"cart_url": settings.cart_url,
		"rescan_delays": list(STOREFRONT_RESCAN_DELAYS),
	}


def is_storefront_path(path, settings):
	return settings.target_marker in (path or "")


def render_head_include(settings, path):
	"""HTML to append to the page's ``head_include``."""
	if not settings.inject_assets:
		return ""

	html = frappe.render_template(MENU_TEMPLATE, menu_asset_context(settings.blocked_slugs))
	if is_storefront_path(path, settings):
		html += frappe.render_template(STOREFRONT_TEMPLATE, storefront_asset_context(settings))
	return html
