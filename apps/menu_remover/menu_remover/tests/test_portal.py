# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Tests for portal page hooks, injected assets and the admin surface.
"""

import os
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from jinja2 import Environment, FileSystemLoader

import menu_remover
from menu_remover import assets, audit
from menu_remover.api import admin, portal
from menu_remover.config import Settings


APP_ROOT = os.path.dirname(os.path.dirname(menu_remover.__file__))


def _render_with_jinja(template, context):
	env = Environment(loader=FileSystemLoader(APP_ROOT))
	return env.get_template(template).render(**context)


class TestUpdateWebsiteContext(unittest.TestCase):

	def setUp(self):
		self.removed = []
		self.settings = Settings()
		patches = [
			patch.object(portal, "get_settings", side_effect=lambda: self.settings),
			patch.object(portal, "log_removed_menu", side_effect=self.removed.append),
			patch.object(assets, "frappe"),
		]
		for p in patches:
			p.start()
			self.addCleanup(p.stop)
		assets.frappe.render_template.side_effect = lambda template, ctx: f"<!-- {template} -->"

	def _context(self, path):
		return {
			"path": path,
			"head_include": "<meta name='x'>",
			"sidebar_items": [
				{"title": "Invoices", "route": "/invoices"},
				{"title": "Orders", "route": "/orders"},
				{"title": "Files", "route": "/files"},
				{"title": "Cart", "route": "/cart"},
			],
		}

	def test_sidebar_filtered(self):
		context = self._context("invoices")

		portal.update_website_context(context)

		self.assertEqual([i["title"] for i in context["sidebar_items"]], ["Invoices", "Cart"])
		self.assertEqual(self.removed, ["orders", "files"])

	def test_menu_assets_on_every_page(self):
		context = self._context("invoices")

		portal.update_website_context(context)

		self.assertTrue(context["head_include"].startswith("<meta name='x'>"))
		self.assertIn(assets.MENU_TEMPLATE, context["head_include"])
		self.assertNotIn(assets.STOREFRONT_TEMPLATE, context["head_include"])

	def test_storefront_assets_on_marker_pages(self):
		context = self._context("omni_sales/omni_sales_client/index/1/4/0")

		portal.update_website_context(context)

		self.assertIn(assets.MENU_TEMPLATE, context["head_include"])
		self.assertIn(assets.STOREFRONT_TEMPLATE, context["head_include"])

	def test_assets_disabled(self):
		self.settings = Settings(inject_assets=False)
		context = self._context("omni_sales/omni_sales_client")

		portal.update_website_context(context)

		self.assertEqual(context["head_include"], "<meta name='x'>")
		self.assertEqual(len(context["sidebar_items"]), 2)

	def test_render_failure_logged_not_raised(self):
		assets.frappe.render_template.side_effect = RuntimeError("template missing")
		context = self._context("invoices")

		with patch.object(portal, "frappe") as frappe_mock:
			portal.update_website_context(context)
			frappe_mock.log_error.assert_called_once()

		self.assertEqual(context["head_include"], "<meta name='x'>")
		self.assertEqual(len(context["sidebar_items"]), 2)

	def test_no_sidebar(self):
		context = {"path": "about"}
		portal.update_website_context(context)
		self.assertNotIn("sidebar_items", context)


class TestAssetTemplates(unittest.TestCase):

	def test_menu_asset_context(self):
		ctx = assets.menu_asset_context(frozenset({"files", "order_list"}))

		self.assertEqual(ctx["slugs"], ["files", "order_list"])
		self.assertIn("clients/files", ctx["href_patterns"])
		self.assertIn("/order_list", ctx["href_patterns"])
		self.assertIn("customers-nav-item-files", ctx["nav_classes"])
		self.assertIn("order list", ctx["text_patterns"])
		self.assertEqual(ctx["rescan_delays"], [300, 600, 1000])

	def test_label_matching_limited_to_nav_containers(self):
		ctx = assets.menu_asset_context(frozenset({"files"}))
		containers = [c.strip() for c in ctx["nav_containers"].split(",")]

		self.assertIn("nav", containers)
		self.assertIn(".web-sidebar", containers)
		self.assertNotIn("a", containers)
		self.assertNotIn("body", containers)

	def test_menu_template_renders(self):
		html = _render_with_jinja(assets.MENU_TEMPLATE, assets.menu_asset_context(frozenset({"files", "calendar"})))

		self.assertIn('a[href*="clients/files"]', html)
		self.assertIn(".customers-nav-item-calendar", html)
		self.assertIn('[data-slug="files"]', html)
		self.assertIn("MutationObserver", html)

	def test_menu_template_label_match_needs_nav_container(self):
		"""A page-body link that merely reads "Files" is left alone."""
		html = _render_with_jinja(assets.MENU_TEMPLATE, assets.menu_asset_context(frozenset({"files"})))

		self.assertIn("var navContainers = ", html)
		self.assertIn("textPatterns.indexOf(text) !== -1 && link.closest(navContainers) !== null", html)
		self.assertIn(".web-sidebar", html)

	def test_storefront_template_renders(self):
		html = _render_with_jinja(assets.STOREFRONT_TEMPLATE, assets.storefront_asset_context(Settings()))

		self.assertIn('"/omni_sales/omni_sales_client/view_cart"', html)
		self.assertIn("Buy Now", html)
		self.assertIn("[300, 600, 1000, 1500]", html)


class TestAdmin(unittest.TestCase):

	def test_boot_session_for_admins(self):
		bootinfo = SimpleNamespace()
		with patch.object(admin, "frappe") as frappe_mock, patch.object(admin, "get_settings", return_value=Settings()):
			frappe_mock.get_roles.return_value = ["System Manager"]
			admin.boot_session(bootinfo)

		self.assertTrue(bootinfo.menu_remover["active"])
		self.assertIn("files", bootinfo.menu_remover["blocked_slugs"])

	def test_boot_session_skips_others(self):
		bootinfo = SimpleNamespace()
		with patch.object(admin, "frappe") as frappe_mock:
			frappe_mock.get_roles.return_value = ["Customer"]
			admin.boot_session(bootinfo)

		self.assertFalse(hasattr(bootinfo, "menu_remover"))

	def test_navigation_report(self):
		menu = [
			{"title": "Invoices", "route": "/invoices"},
			{"title": "Shipments", "route": "/shipments"},
		]
		with patch.object(admin, "frappe") as frappe_mock, \
			patch.object(admin, "get_settings", return_value=Settings()), \
			patch.object(admin, "get_portal_menu", return_value=menu):
			report = admin.get_navigation_report()
			frappe_mock.only_for.assert_called_once_with("System Manager")

		self.assertEqual([i["title"] for i in report["kept"]], ["Invoices"])
		self.assertEqual([i["title"] for i in report["removed"]], ["Shipments"])
		self.assertIn("shipments", report["blocked_slugs"])


class TestAudit(unittest.TestCase):

	def test_log_activity_prefixes_message(self):
		with patch.object(audit, "frappe") as frappe_mock:
			audit.log_activity("Module activated")
			frappe_mock.logger.return_value.info.assert_called_once_with("Menu Remover: Module activated")

	def test_log_failures_swallowed(self):
		with patch.object(audit, "frappe") as frappe_mock:
			frappe_mock.logger.side_effect = RuntimeError("no site")
			audit.log_removed_menu("files")
