# teamdash

A small server-rendered team dashboard built on Flask. It serves two
pages: a dashboard at `/` and a team page at `/team`. Both pages carry a
navigation header with "Dashboard" and "Team" links, and the link for the
page you are on is highlighted. Any other path gets a "Not Found" page
with HTTP status 404.

The package also defines the data models for team members (`Person`) and
for requests to add one (`AddPersonRequest`), along with their validation
rules.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Running the server

```
teamdash
```

The server listens on `127.0.0.1:3000` by default and serves static files
from the site root, `target/site` by default:

- `/pkg/...` comes from `<site-root>/pkg`.
- `/assets/...` comes from the site root itself.
- `/favicon.ico` comes from `<site-root>/favicon.ico`.

Options:

- `--addr HOST:PORT` sets the listening address. It defaults to the
  `LEPTOS_SITE_ADDR` environment variable if that is set.
- `--site-root DIR` sets the directory for static files. It defaults to
  the `LEPTOS_SITE_ROOT` environment variable if that is set.

## Using it as a library

### The web application

`teamdash.app.create_app(site_root)` returns a Flask application. You can
mount it in any WSGI server, or drive it with Flask's test client:

```python
from teamdash.app import create_app

app = create_app("target/site")
response = app.test_client().get("/team")
print(response.status_code, response.get_data(as_text=True))
```

`teamdash.app.render_document(body)` wraps a body fragment in the full
HTML document: the stylesheet link `/pkg/dashboard-app.css`, the title
"Full-Stack Dashboard App", and a `<main>` element that holds the body.

The page fragments come from `teamdash.pages`:

- `render_home_page(current_path)`
- `render_team_page(current_path)`
- `render_not_found()`

The header comes from `teamdash.header`. `render_header(current_path)`
renders the header. `get_style_from_url(current_path, match_url)` returns
`INPUT_STYLE_SELECTED` when the two paths are equal, and `INPUT_STYLE`
otherwise.

### Models

`teamdash.models` provides two dataclasses:

- `Person` has the fields `uuid`, `name`, `title`, `level`,
  `compensation` and `joined_date`.
- `AddPersonRequest` has the fields `name`, `title`, `level` and
  `compensation`.

Both models have the methods `validate()`, `to_dict()` and the class
method `from_dict(data)`.

`validate()` raises `ValidationError`, a subclass of `ValueError`, when a
rule is broken. Its `errors` attribute maps each offending field to a
message. The rules are:

- `name`, `title` and `level` must not be empty.
- `compensation` must be between 2000 and 99999.

`from_dict()` raises `ValueError` in any of these cases:

- a field is missing;
- a text field is not a string;
- `compensation` is not an integer;
- `compensation` does not fit in a 32-bit signed integer.

```python
from teamdash.models import AddPersonRequest, ValidationError

req = AddPersonRequest.from_dict(
    {"name": "Ada", "title": "Engineer", "level": "L3", "compensation": 500}
)
try:
    req.validate()
except ValidationError as exc:
    print(exc.errors)  # {'compensation': 'compensation must be between 2000 and 99999'}
```

## What it does not do

The package has no storage for team members. It offers no API endpoints
for listing or adding people. The pages themselves show only placeholder
text. The models are available for validation and for conversion to and
from dictionaries, but nothing in the server stores or shows them.