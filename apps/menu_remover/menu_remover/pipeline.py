# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Ordered request policies run from the ``before_request`` hook.

Each policy has a single ``apply(ctx)`` method returning a RedirectDecision
or None. The first redirect wins and the remaining policies are skipped.
"""

from dataclasses import dataclass

from menu_remover.routing import (
	RedirectDecision,
	clamp_quantity,
	decide_redirect,
)


@dataclass
class RequestContext:
	path: str
	is_logged_in: bool = False
	is_page_request: bool = True
	component: str = ""
	# POST, GET and merged parameter sets, mutated in place
	param_sets: tuple = ()


def _noop(message):
	pass


class HomeRedirectPolicy:
	"""Send logged-in clients from the root URL / client home to the storefront."""

	def __init__(self, target_url, log=None):
		self.target_url = target_url
		self.log = log or _noop

	def apply(self, ctx):
		if not ctx.is_page_request:
			return None

		decision = decide_redirect(ctx.path, ctx.is_logged_in, self.target_url)
		if not decision.should_redirect:
			return None

		if ctx.path.strip("/"):
			self.log("Redirecting from client homepage to storefront")
		else:
			self.log("Redirecting from root URL to storefront")
		return decision


class LoginRedirectPolicy:
	"""Consume the post-login flag on the next page request."""

	def __init__(self, flag, target_url, marker, log=None):
		self.flag = flag
		self.target_url = target_url
		self.marker = marker
		self.log = log or _noop

	def apply(self, ctx):
		if not ctx.is_page_request:
			return None
		if not self.flag.consume():
			return None
		if self.marker in ctx.path:
			return None

		self.log("Force redirecting to storefront after login")
		return RedirectDecision.to(self.target_url)


class QuantityClampPolicy:
	"""Force ``quantity`` to 1 on requests addressed to the storefront."""

	def __init__(self, marker, log=None):
		self.marker = marker
		self.log = log or _noop

	def apply(self, ctx):
		if self.marker not in (ctx.component or ""):
			return None

		# every set is clamped, not just the first that has the field
		clamped = [clamp_quantity(params) for params in ctx.param_sets]
		if any(clamped):
			self.log("Forced quantity to 1 for storefront request")
		return None


class RequestPipeline:
	def __init__(self, policies):
		self.policies = tuple(policies)

	def run(self, ctx):
		for policy in self.policies:
			decision = policy.apply(ctx)
			if decision is not None and decision.should_redirect:
				return decision
		return RedirectDecision.none()


def build_pipeline(settings, flag, log=None):
	"""The standard policy order: home redirect, login redirect, quantity clamp."""
	return RequestPipeline([
		HomeRedirectPolicy(settings.redirect_url, log=log),
		LoginRedirectPolicy(flag, settings.redirect_url, settings.target_marker, log=log),
		QuantityClampPolicy(settings.target_marker, log=log),
	])
