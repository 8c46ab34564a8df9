"""
HTML page templates for the greeting service.

Templates use simple {variable} substitution rendered with ``str.format_map``;
literal CSS braces are doubled. Every value bound into a template must already
be HTML-safe (escaped name, slug, URLs built from a slug).
"""

import re
from dataclasses import asdict, dataclass

SITE_TITLE = "Happy Friendship Wishes"
SITE_DESCRIPTION = (
    "Happy Friendship Day ASCII Text Greeting Art - "
    "Friendship Day Greeting Generator With Name."
)

_HEAD_STYLE = """
        * {{ box-sizing: border-box; }}
        html, body {{ min-height: 100vh; margin: 0; padding: 0; }}
        body {{
            font-family: "Roboto Condensed", sans-serif;
            background-color: #58B19F;
            color: #2C3A47;
        }}
        .container {{
            max-width: 800px;
            margin: 2rem auto;
            background-color: #fff;
            padding: 2rem;
            border-radius: 16px;
            box-shadow: 0 10px 30px rgba(0, 0, 0, 0.1);
            text-align: center;
        }}
        pre {{
            font-family: monospace;
            font-size: 14px;
            text-align: left;
            background-color: #3d3d3d;
            color: #ecf0f1;
            padding: 20px;
            border-radius: 10px;
            overflow-x: auto;
        }}
        img {{ max-width: 100%; border-radius: 10px; }}
        .button {{
            display: inline-block;
            padding: 0.6rem 1.2rem;
            margin: 0.5rem;
            border: none;
            border-radius: 10px;
            background-color: #25d366;
            color: #fff;
            text-decoration: none;
            font-weight: 700;
        }}
        input[type=text] {{
            width: 100%;
            padding: 0.6rem;
            margin-bottom: 0.8rem;
            border-radius: 10px;
            border: 1px solid #ccc;
        }}
"""

_FORM = """
        <form action="/wish/web" method="get">
            <label for="name">Your Name</label>
            <input type="text" id="name" name="name" placeholder="Enter your name"
                   minlength="1" maxlength="{max_length}" required>
            <button class="button" type="submit">Generate Greeting</button>
        </form>
"""

HOME_PAGE = (
    """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Friendship Day Greeting Generator</title>
    <meta name="description" content="Create beautiful ASCII art greetings for your friends.">
    <meta property="og:site_name" content="Friendship Day Greeting Generator">
    <meta property="og:type" content="website">
    <meta property="og:title" content="Friendship Day Greeting Generator">
    <meta property="og:description" content="Create beautiful ASCII art greetings for your friends.">
    <meta property="og:image" content="{sample_image_url}">
    <style>"""
    + _HEAD_STYLE
    + """    </style>
</head>
<body>
    <div class="container">
        <h1>Create Your Personalized Greeting</h1>
        <p>Generate ASCII art greetings to share with your friends and loved ones</p>
"""
    + _FORM
    + """        <footer><p>Made with love for Friendship Day</p></footer>
    </div>
</body>
</html>
"""
)

WISH_PAGE = (
    """<!DOCTYPE html>
<html lang="en" prefix="og: https://ogp.me/ns#">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{display_name} : {site_title}</title>
    <meta name="description" content="{site_description}">
    <link rel="canonical" href="{share_url}">

    <meta property="og:site_name" content="{display_name} : {site_title}">
    <meta property="og:type" content="website">
    <meta property="og:title" content="{display_name} : {site_title}">
    <meta property="og:description" content="{site_description}">
    <meta property="og:url" content="{share_url}">
    <meta property="og:image" content="{image_url}">
    <meta property="og:image:alt" content="{display_name} : {site_title}">
    <meta property="og:image:width" content="1080">
    <meta property="og:image:height" content="1080">

    <meta name="twitter:title" content="{display_name} : {site_title}">
    <meta name="twitter:description" content="{site_description}">
    <meta name="twitter:url" content="{share_url}">
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:image" content="{image_url}">
    <style>"""
    + _HEAD_STYLE
    + """    </style>
</head>
<body>
    <div class="container">
        <img src="{image_url}" alt="Happy Friendship Day {display_name}" loading="lazy">
        <div>
            <a class="button" href="{download_url}" target="_blank" rel="nofollow noopener">Download Image</a>
        </div>
        <pre id="ascii-art">{greeting}</pre>
        <p>Share: <a href="{share_url}">{share_url}</a></p>
        <pre>$ curl -G --data-urlencode "name={display_name}" {text_url}

$ http -b GET "{text_url}" "name=={display_name}"</pre>
        <h2>Create Your Greeting</h2>
"""
    + _FORM
    + """    </div>
</body>
</html>
"""
)

ERROR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{status_code} {reason}</title>
    <style>
        body {{
            font-family: Arial, sans-serif;
            text-align: center;
            padding: 50px;
            background-color: #58B19F;
        }}
        h1 {{ font-size: 50px; color: #fff; }}
        p {{ font-size: 20px; color: #fff; }}
        a {{ color: #fff; text-decoration: underline; }}
    </style>
</head>
<body>
    <h1>{status_code}</h1>
    <p>{reason}</p>
    <p><a href="/">Go to Home Page</a></p>
</body>
</html>
"""


@dataclass(frozen=True)
class WishCard:
    """Named fields a greeting page is rendered from."""

    display_name: str
    slug: str
    greeting: str
    share_url: str
    text_url: str
    image_url: str
    download_url: str


def template_fields(template: str) -> set[str]:
    """Return the {variable} names a template expects (doubled braces excluded)."""
    stripped = template.replace("{{", "").replace("}}", "")
    return set(re.findall(r"\{(\w+)\}", stripped))


def render_home(sample_image_url: str, max_length: int) -> str:
    return HOME_PAGE.format_map(
        {"sample_image_url": sample_image_url, "max_length": max_length}
    )


def render_wish(card: WishCard, max_length: int) -> str:
    fields = asdict(card)
    fields.update(
        site_title=SITE_TITLE,
        site_description=SITE_DESCRIPTION,
        max_length=max_length,
    )
    return WISH_PAGE.format_map(fields)


def render_error(status_code: int, reason: str) -> str:
    return ERROR_PAGE.format_map({"status_code": status_code, "reason": reason})
