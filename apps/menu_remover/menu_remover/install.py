# Copyright (c) 2026, EchoPx and contributors
# For license information, please see license.txt

from menu_remover.audit import log_activity


def after_install():
	log_activity("Module activated")


def before_uninstall():
	log_activity("Module deactivated")
