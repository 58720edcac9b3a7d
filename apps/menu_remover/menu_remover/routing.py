# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Redirect rules for the client portal.

- Root URL: logged-in clients go to the storefront, guests see the homepage.
- Client home (``clients`` or ``clients/index``): logged-in clients go to
  the storefront.
- Right after login a one-shot flag is armed in the session; the next page
  request consumes it and redirects unless it is already on the storefront.
- Storefront requests get their ``quantity`` parameter forced to 1.
"""

import enum
from collections import namedtuple


CLIENT_AREA = "clients"
CLIENT_HOME = "index"
QUANTITY_FIELD = "quantity"
API_METHOD_PREFIX = "api/method/"

# First path segments that never render a portal page
NON_PAGE_ROOTS = frozenset({"api", "assets", "files", "private", "socket.io", "app", "desk"})


class RedirectDecision(namedtuple("RedirectDecision", ["should_redirect", "target_url"])):
	__slots__ = ()

	@classmethod
	def to(cls, target_url):
		return cls(True, target_url)

	@classmethod
	def none(cls):
		return cls(False, "")


def _segments(path):
	return [s for s in (path or "").strip("/").split("/") if s]


def is_client_homepage(path):
	"""True for ``clients`` and ``clients/index`` with no further segment."""
	segments = _segments(path)
	if not segments or segments[0] != CLIENT_AREA:
		return False
	if len(segments) == 1:
		return True
	return len(segments) == 2 and segments[1] == CLIENT_HOME


def decide_redirect(path, is_logged_in, target):
	if not _segments(path):
		# Guests fall through to the normal homepage
		return RedirectDecision.to(target) if is_logged_in else RedirectDecision.none()

	if is_logged_in and is_client_homepage(path):
		return RedirectDecision.to(target)

	return RedirectDecision.none()


def is_page_request(path, method="GET", cmd=None):
	"""Whether a request renders a portal page (as opposed to API/asset/cmd calls)."""
	if cmd or (method or "GET").upper() != "GET":
		return False
	segments = _segments(path)
	return not segments or segments[0] not in NON_PAGE_ROOTS


def request_component(path, cmd=None):
	"""
	Name of the component a request is addressed to.

	For ``/api/method/<dotted.path>`` and ``cmd`` calls that is the dotted
	method; for page requests it is the route itself.
	"""
	if cmd:
		return cmd
	path = (path or "").strip("/")
	if path.startswith(API_METHOD_PREFIX):
		return path[len(API_METHOD_PREFIX):]
	return path


def clamp_quantity(params):
	"""Overwrite ``quantity`` with the integer 1 if present. Returns True if it was."""
	if params is None or QUANTITY_FIELD not in params:
		return False
	params[QUANTITY_FIELD] = 1
	return True


# ──────────────────────────────────────────────────────────────────────────────
# One-shot login redirect flag
# ──────────────────────────────────────────────────────────────────────────────


class LoginRedirectState(enum.Enum):
	UNSET = "unset"
	SET = "set"
	CONSUMED = "consumed"


class LoginRedirectFlag:
	"""
	Session-scoped flag: armed on login, consumed by the next page request.

	``store`` is any mapping-like session store supporting ``get`` and item
	assignment.
	"""

	def __init__(self, store, key):
		self.store = store
		self.key = key

	def state(self):
		value = self.store.get(self.key)
		if not value:
			return LoginRedirectState.UNSET
		try:
			return LoginRedirectState(value)
		except ValueError:
			return LoginRedirectState.UNSET

	def arm(self):
		self.store[self.key] = LoginRedirectState.SET.value

	def consume(self):
		"""Move SET -> CONSUMED. Returns True only for the call that did it."""
		if self.state() is not LoginRedirectState.SET:
			return False
		self.store[self.key] = LoginRedirectState.CONSUMED.value
		return True
