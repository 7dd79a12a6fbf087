"""
Views for the users app.

The user list is the page the code explorer shows off: its template ends
with {% show_source_code %}.
"""

from django.shortcuts import render

from demo.users.models import User


def user_list(request):
    """Enabled users, newest first."""
    users = User.objects.filter(enabled=True).order_by("-created_at")
    return render(request, "users/user_list.html", {"users": users})
