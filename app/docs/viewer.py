"""
Swagger UI page served at /api-docs.
Assets come from the unpkg CDN; the schema is fetched from /swagger.json.
"""

SWAGGER_UI_VERSION = "4.15.5"
SWAGGER_UI_CDN = f"https://unpkg.com/swagger-ui-dist@{SWAGGER_UI_VERSION}"

SWAGGER_UI_HTML = f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>API Documentation - My API</title>
    <link rel="stylesheet" type="text/css" href="{SWAGGER_UI_CDN}/swagger-ui.css" />
    <style>
        html {{
            box-sizing: border-box;
            overflow: -moz-scrollbars-vertical;
            overflow-y: scroll;
        }}
        *, *:before, *:after {{
            box-sizing: inherit;
        }}
        body {{
            margin: 0;
            background: #fafafa;
        }}
        .swagger-ui .topbar {{
            display: none;
        }}
    </style>
</head>
<body>
    <div id="swagger-ui"></div>
    <script src="{SWAGGER_UI_CDN}/swagger-ui-bundle.js"></script>
    <script src="{SWAGGER_UI_CDN}/swagger-ui-standalone-preset.js"></script>
    <script>
        window.onload = function() {{
            const ui = SwaggerUIBundle({{
                url: '/swagger.json',
                dom_id: '#swagger-ui',
                deepLinking: true,
                presets: [
                    SwaggerUIBundle.presets.apis,
                    SwaggerUIStandalonePreset
                ],
                plugins: [
                    SwaggerUIBundle.plugins.DownloadUrl
                ],
                layout: "StandaloneLayout",
                tryItOutEnabled: true,
                supportedSubmitMethods: ['get', 'post', 'put', 'delete', 'patch'],
                docExpansion: 'list',
                filter: true,
                showRequestHeaders: true
            }});
        }};
    </script>
</body>
</html>"""
