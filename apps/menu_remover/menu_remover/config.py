# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Site-level settings for Menu Remover.

Defaults live in this module. A site can override any of them from
site_config.json under the ``menu_remover`` key:

	"menu_remover": {
		"blocked_slugs": ["files", "calendar"],
		"redirect_target": "omni_sales/omni_sales_client/index/1/4/0",
		"inject_assets": 0
	}
"""

from dataclasses import dataclass, fields


CONF_KEY = "menu_remover"

# Portal menu slugs that must never be shown to clients
BLOCKED_SLUGS = frozenset({
	# Orders / shipments
	"order_list",
	"orderlist",
	"orders",
	"shipments",
	"shipment",
	# Files
	"files",
	"file",
	"documents",
	# Calendar
	"calendar",
	"calendars",
	"events",
})

REDIRECT_TARGET = "omni_sales/omni_sales_client/index/1/4/0"
TARGET_MARKER = "omni_sales"
CART_ROUTE = "omni_sales/omni_sales_client/view_cart"
LOGIN_REDIRECT_KEY = "omni_sales_login_redirect"


@dataclass(frozen=True)
class Settings:
	blocked_slugs: frozenset = BLOCKED_SLUGS
	redirect_target: str = REDIRECT_TARGET
	target_marker: str = TARGET_MARKER
	cart_route: str = CART_ROUTE
	login_redirect_key: str = LOGIN_REDIRECT_KEY
	inject_assets: bool = True

	@classmethod
	def from_conf(cls, conf=None):
		"""Build settings from a site config mapping, ignoring unknown keys."""
		overrides = (conf or {}).get(CONF_KEY) or {}
		known = {f.name for f in fields(cls)}

		values = {k: v for k, v in overrides.items() if k in known and v is not None}
		if "blocked_slugs" in values:
			values["blocked_slugs"] = frozenset(values["blocked_slugs"])
		if "inject_assets" in values:
			values["inject_assets"] = bool(values["inject_assets"])

		return cls(**values)

	@property
	def redirect_url(self):
		return "/" + self.redirect_target.strip("/")

	@property
	def cart_url(self):
		return "/" + self.cart_route.strip("/")


def get_settings():
	"""Settings for the current site."""
	import frappe

	return Settings.from_conf(frappe.conf)
