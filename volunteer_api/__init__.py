"""Volunteer management API: notifications and volunteer-event matching."""
