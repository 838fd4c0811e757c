"""Minimal HTML for the landing page, the login and signup forms and the protected home page."""

from collections.abc import Sequence
from html import escape

from gatehouse.schemas.auth import SessionUser, UserProfile, ValidationIssue

_DOCUMENT = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def _document(title: str, body: str) -> str:
    return _DOCUMENT.format(title=escape(title), body=body)


def _feedback(message: str | None, issues: Sequence[ValidationIssue] | None) -> str:
    out = f'<p class="error">{escape(message)}</p>\n' if message else ""
    if issues:
        items = "".join(
            f"<li>{escape(i.field)}: {escape(i.message)}</li>" for i in issues
        )
        out += f'<ul class="issues">{items}</ul>\n'
    return out


def _login_form(next_path: str) -> str:
    return (
        '<form method="post" action="/login">\n'
        f'<input type="hidden" name="next" value="{escape(next_path)}">\n'
        '<label>Email <input type="email" name="email" required></label>\n'
        '<label>Password <input type="password" name="password" required></label>\n'
        '<button type="submit">Login</button>\n'
        "</form>"
    )


def _signup_form(next_path: str) -> str:
    return (
        '<form method="post" action="/signup">\n'
        f'<input type="hidden" name="redirectUrl" value="{escape(next_path)}">\n'
        '<label>Email <input type="email" name="email" required></label>\n'
        '<label>Password <input type="password" name="password" required></label>\n'
        '<label>First name <input type="text" name="first_name" required></label>\n'
        '<label>Last name <input type="text" name="last_name" required></label>\n'
        '<button type="submit">Sign up</button>\n'
        "</form>"
    )


def render_login_page(
    next_path: str = "/home",
    message: str | None = None,
    issues: Sequence[ValidationIssue] | None = None,
) -> str:
    """Login form followed by a signup form; both return to next_path on success."""
    body = (
        "<h1>Login</h1>\n"
        + _feedback(message, issues)
        + _login_form(next_path)
        + "\n<h2>Sign up</h2>\n"
        + _signup_form(next_path)
    )
    return _document("Login", body)


def render_landing_page(user: SessionUser | None) -> str:
    if user is None:
        return render_login_page()
    body = (
        f"<p>Logged in as {escape(user.email)}</p>\n"
        '<p><a href="/home">Home</a> | <a href="/logout">Logout</a></p>'
    )
    return _document("Gatehouse", body)


def render_home_page(profile: UserProfile, session_user: SessionUser) -> str:
    # Role, id and email come from the session, which may lag behind the user row.
    body = (
        f"<h3>Welcome Back, {escape(profile.first_name)}!</h3>\n"
        "<div>\n"
        f"<p>Your role is: {escape(session_user.role)}</p>\n"
        f"<p>Your user id is: {session_user.id}</p>\n"
        f"<p>Your email id is: {escape(session_user.email)}</p>\n"
        "</div>\n"
        '<p><a href="/logout">Logout</a></p>'
    )
    return _document("Home", body)
