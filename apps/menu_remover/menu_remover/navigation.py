# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

"""
Block-list filtering for client portal navigation.

An entry is dropped when its slug is an exact, case-sensitive member of the
block-list. Entries without a slug always stay. The input is never modified;
a new list (or dict, for keyed navigation) is returned.
"""

from collections.abc import Mapping


def entry_slug(entry):
	"""Return the ``slug`` of a navigation entry, or None."""
	if isinstance(entry, Mapping):
		slug = entry.get("slug")
	else:
		slug = getattr(entry, "slug", None)
	return slug or None


def portal_slug(entry):
	"""
	Slug of a Frappe portal menu item.

	Portal items carry a ``route`` but usually no ``slug``, so the last
	route segment stands in for it: ``/orders`` -> ``orders``.
	"""
	slug = entry_slug(entry)
	if slug:
		return slug

	if isinstance(entry, Mapping):
		route = entry.get("route")
	else:
		route = getattr(entry, "route", None)

	if not route or not isinstance(route, str):
		return None

	segments = [s for s in route.split("?")[0].split("/") if s]
	return segments[-1] if segments else None


def is_blocked(slug, blocked_slugs):
	return isinstance(slug, str) and slug in blocked_slugs


def filter_navigation(entries, blocked_slugs, slug_of=entry_slug, on_remove=None):
	"""
	Drop navigation entries whose slug is in ``blocked_slugs``.

	``entries`` is either a sequence of entries or a mapping of key -> entry;
	for a mapping the key is used when the entry has no slug of its own.
	``on_remove(slug)`` is called once per dropped entry. It is best-effort:
	whatever it raises is ignored.
	"""
	if not entries:
		return {} if isinstance(entries, Mapping) else []

	if isinstance(entries, Mapping):
		kept = {}
		for key, entry in entries.items():
			slug = slug_of(entry) or key
			if is_blocked(slug, blocked_slugs):
				_notify(on_remove, slug)
				continue
			kept[key] = entry
		return kept

	kept = []
	for entry in entries:
		slug = slug_of(entry)
		if is_blocked(slug, blocked_slugs):
			_notify(on_remove, slug)
			continue
		kept.append(entry)
	return kept


def _notify(on_remove, slug):
	if on_remove is None:
		return
	try:
		on_remove(slug)
	except Exception:
		pass
