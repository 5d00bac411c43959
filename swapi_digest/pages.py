"""HTML landing page with the fetch trigger button."""

from html import escape

from swapi_digest.metrics import StatsSnapshot

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Star Wars API Demo</title>
    <style>
        body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
        h1 {{ color: #FFE81F; background-color: #000; padding: 10px; }}
        button {{ background-color: #FFE81F; border: none; padding: 10px 20px; cursor: pointer; }}
        .footer {{ margin-top: 50px; font-size: 12px; color: #666; }}
        pre {{ background: #f4f4f4; padding: 10px; border-radius: 5px; }}
    </style>
</head>
<body>
    <h1>Star Wars API Demo</h1>
    <p>This page fetches data from the Star Wars API.</p>
    <p>Results are printed on the server console.</p>
    <button onclick="triggerFetch()">Fetch Star Wars Data</button>
    <div id="results"></div>
    <script>
        function triggerFetch() {{
            const results = document.getElementById('results');
            results.innerHTML = '<p>Loading data...</p>';
            fetch('/api')
                .then(res => res.text())
                .then(() => {{
                    results.innerHTML = '<p>Data fetched! Check server console.</p>';
                }})
                .catch(err => {{
                    results.innerHTML = '<p>Error: ' + err.message + '</p>';
                }});
        }}
    </script>
    <div class="footer">
        <p>API calls: {api_calls} | Cache entries: {cache_size} | Errors: {errors}</p>
        <pre>Debug mode: {debug} | Timeout: {timeout}ms</pre>
    </div>
</body>
</html>
"""


def render_index(snapshot: StatsSnapshot) -> str:
    """Fill the landing page footer with the current counters."""
    return _PAGE_TEMPLATE.format(
        api_calls=snapshot.api_calls,
        cache_size=snapshot.cache_size,
        errors=snapshot.errors,
        debug="ON" if snapshot.debug else "OFF",
        timeout=escape(str(snapshot.timeout)),
    )
