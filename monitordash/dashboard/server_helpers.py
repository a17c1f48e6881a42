"""Shared constants for the dashboard server."""

from __future__ import annotations

HTML_CONTENT_TYPE = "text/html"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Packaged bundle layout: monitordash.wwwroot.monitoring.<relative path>
BUNDLE_NAMESPACE = "monitordash"
BUNDLE_ASSET_ROOT = "wwwroot.monitoring"
PACKAGED_NAMESPACE = f"{BUNDLE_NAMESPACE}.wwwroot"

UNAUTHORIZED_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Unauthorized</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
            display: flex;
            align-items: center;
            justify-content: center;
            min-height: 100vh;
            margin: 0;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        }
        .container {
            background: white;
            padding: 40px;
            border-radius: 15px;
            box-shadow: 0 10px 30px rgba(0,0,0,0.2);
            text-align: center;
            max-width: 500px;
        }
        h1 { color: #e74c3c; margin-bottom: 10px; }
        p { color: #666; }
    </style>
</head>
<body>
    <div class="container">
        <h1>401 - Unauthorized</h1>
        <p>You don't have permission to access this dashboard.</p>
    </div>
</body>
</html>
"""

# Served when the packaged dashboard.html cannot be found. Carries the same
# template tokens as the packaged shell.
FALLBACK_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{DASHBOARD_TITLE}}</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            padding: 20px;
        }
        .container { max-width: 1400px; margin: 0 auto; }
        .panel {
            background: white;
            padding: 30px;
            border-radius: 15px;
            box-shadow: 0 10px 30px rgba(0,0,0,0.2);
            margin-bottom: 20px;
        }
        .panel h1 { color: #333; font-size: 32px; margin-bottom: 10px; }
        .panel h2 { color: #333; font-size: 24px; margin-bottom: 20px; }
        .panel p { color: #666; font-size: 14px; }
        label { display: block; color: #666; font-size: 13px; margin-bottom: 5px; }
        input {
            width: 100%;
            padding: 10px;
            border: 1px solid #ddd;
            border-radius: 6px;
            margin-bottom: 15px;
        }
        .btn {
            background: #667eea;
            color: white;
            border: none;
            padding: 12px 24px;
            border-radius: 8px;
            cursor: pointer;
        }
        .error { background: #fee; color: #c33; padding: 15px; border-radius: 8px; }
        pre { background: #f8f9fa; padding: 20px; border-radius: 8px; overflow-x: auto; font-size: 13px; }
    </style>
</head>
<body>
    <div class="container">
        <div class="panel">
            <h1>{{DASHBOARD_TITLE}}</h1>
            <p>Real-time monitoring dashboard &bull; Last updated: <span id="lastUpdate">-</span></p>
        </div>
        <div class="panel">
            <h2>API Configuration</h2>
            <label for="apiEndpoint">Data API Endpoint URL:</label>
            <input type="text" id="apiEndpoint" value="{{DEFAULT_ENDPOINT}}">
            <button class="btn" onclick="fetchData()">Refresh Data</button>
        </div>
        <div class="panel">
            <h2>Monitoring Data</h2>
            <div id="dataContent"><p>Loading data...</p></div>
        </div>
    </div>
    <script>
        async function fetchData() {
            const endpoint = document.getElementById("apiEndpoint").value;
            const target = document.getElementById("dataContent");
            if (!endpoint) {
                target.innerHTML = '<div class="error">Please enter an API endpoint URL</div>';
                return;
            }
            try {
                const response = await fetch(endpoint);
                if (!response.ok) {
                    throw new Error(`HTTP error! status: ${response.status}`);
                }
                const data = await response.json();
                const pre = document.createElement("pre");
                pre.textContent = JSON.stringify(data, null, 2);
                target.replaceChildren(pre);
                document.getElementById("lastUpdate").textContent = new Date().toLocaleString();
            } catch (error) {
                const box = document.createElement("div");
                box.className = "error";
                box.textContent = `Error fetching data: ${error.message}`;
                target.replaceChildren(box);
            }
        }

        window.addEventListener("load", () => {
            fetchData();
            if ({{AUTO_REFRESH}}) {
                setInterval(fetchData, {{REFRESH_INTERVAL}});
            }
        });
    </script>
</body>
</html>
"""
