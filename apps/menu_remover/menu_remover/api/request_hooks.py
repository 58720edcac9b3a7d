# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Request-time hooks: storefront redirects and the quantity clamp.

before_request runs one RequestPipeline per request:
1. root URL / client home -> storefront for logged-in clients
2. post-login flag (armed in on_session_creation) -> storefront, once
3. quantity forced to 1 on storefront requests
"""

import frappe
from frappe.utils import get_url
from werkzeug.datastructures import ImmutableMultiDict

from menu_remover.audit import log_activity
from menu_remover.config import get_settings
from menu_remover.pipeline import RequestContext, build_pipeline
from menu_remover.routing import (
	QUANTITY_FIELD,
	LoginRedirectFlag,
	is_page_request,
	request_component,
)


# Seconds an armed login flag survives in the cache
LOGIN_FLAG_TTL = 60 * 60


class SessionFlagStore:
	"""Mapping-style view of per-session values kept in the Redis cache."""

	def __init__(self, sid, expires_in_sec=LOGIN_FLAG_TTL):
		self.sid = sid
		self.expires_in_sec = expires_in_sec

	def _cache_key(self, key):
		return f"menu_remover:{key}:{self.sid}"

	def get(self, key, default=None):
		value = frappe.cache.get_value(self._cache_key(key))
		return default if value is None else value

	def __setitem__(self, key, value):
		frappe.cache.set_value(self._cache_key(key), value, expires_in_sec=self.expires_in_sec)


def is_client_logged_in():
	"""A portal (Website User) session, as opposed to Guest or desk users."""
	session = getattr(frappe, "session", None)
	user = session and session.user
	if not user or user == "Guest":
		return False
	return frappe.get_cached_value("User", user, "user_type") == "Website User"


def get_login_flag(settings=None):
	settings = settings or get_settings()
	return LoginRedirectFlag(SessionFlagStore(frappe.session.sid), settings.login_redirect_key)


# ──────────────────────────────────────────────────────────────────────────────
# HOOKS (registered in hooks.py)
# ──────────────────────────────────────────────────────────────────────────────


def before_request():
	request = getattr(frappe.local, "request", None)
	if request is None:
		return

	settings = get_settings()
	path = (request.path or "").strip("/")
	cmd = frappe.form_dict.get("cmd")

	form = request.form.copy()
	args = request.args.copy()

	ctx = RequestContext(
		path=path,
		is_logged_in=is_client_logged_in(),
		is_page_request=is_page_request(path, request.method, cmd),
		component=request_component(path, cmd),
		param_sets=(form, args, frappe.form_dict),
	)

	decision = build_pipeline(settings, get_login_flag(settings), log=log_activity).run(ctx)
	if decision.should_redirect:
		frappe.redirect(get_url(decision.target_url))

	# werkzeug's parsed parameters are immutable; swap in the clamped copies
	if QUANTITY_FIELD in form:
		request.form = ImmutableMultiDict(form)
	if QUANTITY_FIELD in args:
		request.args = ImmutableMultiDict(args)


def on_session_creation(login_manager=None):
	"""Arm the one-shot redirect for the first page after a client logs in."""
	if not is_client_logged_in():
		return

	get_login_flag().arm()
	log_activity("Redirecting client after login to storefront")


def get_website_user_home_page(user=None):
	"""Landing page for portal users right after login."""
	return get_settings().redirect_target
