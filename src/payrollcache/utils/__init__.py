"""Utilities for payrollcache."""
