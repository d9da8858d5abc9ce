"""Small Flask site with keyboard-navigable pages for the e2e tests."""
import os

from flask import Flask, render_template_string, request

LAYOUT = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }} | Fixture site</title>
  <style>
    .skip-link { position: absolute; left: -999px; }
    .skip-link:focus { left: 8px; }
  </style>
</head>
<body>
  <a class="skip-link" href="#main">Skip to main content</a>
  <header>
    <nav aria-label="Primary">
      <a href="/" aria-label="Home page">Fixture</a>
      <a href="/contact">Contact</a>
    </nav>
    <form action="/search" method="get" role="search">
      <input type="search" name="q" aria-label="Search" placeholder="Search docs">
      <button type="submit">Go</button>
    </form>
  </header>
  <main id="main" tabindex="-1">
    {{ body|safe }}
  </main>
</body>
</html>
"""

HOME = """
<h1>Welcome</h1>
<p>Pages for exercising keyboard navigation.</p>
<a href="/contact">Write to us</a>
"""

CONTACT = """
<h1>Contact</h1>
<form action="/contact" method="post">
  <span id="name-label">Your name</span>
  <input name="name" aria-labelledby="name-label">
  <input type="email" name="email" placeholder="Email address">
  <textarea name="message" title="Message"></textarea>
  <button type="submit">Send message</button>
</form>
"""

RESULTS = """
<h1>Results for {{ query }}</h1>
<ul>
  <li><a href="/contact">Keyboard accessibility guide</a></li>
  <li><a href="/">Focus order and screen readers</a></li>
</ul>
"""


def create_app():
    app = Flask(__name__)

    def render(title, body, **context):
        return render_template_string(LAYOUT, title=title, body=render_template_string(body, **context))

    @app.route("/")
    def home():
        return render("Home", HOME)

    @app.route("/contact", methods=["GET", "POST"])
    def contact():
        if request.method == "POST":
            return render("Thank you", "<h1>Thank you</h1><a href=\"/\">Back home</a>")
        return render("Contact", CONTACT)

    @app.route("/search")
    def search():
        query = request.args.get("q", "").strip()
        return render(f"Results for {query}", RESULTS, query=query)

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host="127.0.0.1", port=int(os.environ.get("FIXTURE_SITE_PORT", "5055")))
