from __future__ import annotations

import json

GRAPHIQL_VERSION = "3.0.9"
REACT_VERSION = "18.2.0"

_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>GraphiQL</title>
    <style>
      body {{ height: 100%; margin: 0; width: 100%; overflow: hidden; }}
      #graphiql {{ height: 100vh; }}
    </style>
    <link rel="stylesheet" href="https://unpkg.com/graphiql@{graphiql_version}/graphiql.min.css" />
    <script crossorigin src="https://unpkg.com/react@{react_version}/umd/react.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/react-dom@{react_version}/umd/react-dom.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/graphiql@{graphiql_version}/graphiql.min.js"></script>
  </head>
  <body>
    <div id="graphiql">Loading...</div>
    <script>
      const fetcher = GraphiQL.createFetcher({{ url: {endpoint} }});
      const root = ReactDOM.createRoot(document.getElementById("graphiql"));
      root.render(React.createElement(GraphiQL, {{ fetcher: fetcher }}));
    </script>
  </body>
</html>
"""


def graphiql_source(endpoint: str) -> str:
    """Render the GraphiQL page, pointed at ``endpoint``."""
    return _TEMPLATE.format(
        # json.dumps gives a correctly quoted JS string literal
        endpoint=json.dumps(endpoint),
        graphiql_version=GRAPHIQL_VERSION,
        react_version=REACT_VERSION,
    )
