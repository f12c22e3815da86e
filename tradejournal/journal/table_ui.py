"""Web view for a TradeStore: trade list, totals, add form and delete."""

import asyncio
import logging
import webbrowser
from typing import Any, Dict, List

from aiohttp import web

from ..exceptions import EntryError, InvalidIndexError
from ..risk import format_risk
from .entry import submit_trade_entry
from .store import TradeStore

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080

STORE_KEY = web.AppKey("store", TradeStore)

COLUMNS = [
    {"key": "ticker", "label": "Ticker"},
    {"key": "tvh", "label": "TVH", "format": "price"},
    {"key": "sl", "label": "SL", "format": "price"},
    {"key": "risk", "label": "Risk", "format": "risk"},
]


def journal_rows(store: TradeStore) -> List[Dict[str, Any]]:
    """Rows for the list view, each tagged with its current position."""
    return [dict(trade.to_row(), index=i) for i, trade in enumerate(store)]


def journal_stats(store: TradeStore) -> Dict[str, Any]:
    """Summary figures for the header."""
    return {
        "trades": len(store),
        "total_risk": format_risk(store.total_risk),
    }


def create_journal_app(store: TradeStore) -> web.Application:
    """
    Create an aiohttp app serving the journal for ``store``.

    Routes:
        GET    /            HTML page
        GET    /api/trades  Row list
        GET    /api/stats   Trade count and total risk
        POST   /api/trades  Add a trade from {"ticker", "tvh", "sl"} text
        DELETE /api/trades  Remove {"indices": [...]} positions
    """

    async def handle_index(request):
        return web.Response(text=_generate_html("Trades", COLUMNS), content_type="text/html")

    async def handle_list(request):
        return web.json_response(journal_rows(request.app[STORE_KEY]))

    async def handle_stats(request):
        return web.json_response(journal_stats(request.app[STORE_KEY]))

    async def handle_add(request):
        body = await _read_json(request)
        if body is None:
            return web.json_response({"error": "Body must be a JSON object"}, status=400)

        # Missing or null fields count as blank form inputs
        fields = {}
        for name in ("ticker", "tvh", "sl"):
            value = body.get(name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                return web.json_response(
                    {"error": f"{name} must be a string", "field": name}, status=400
                )
            fields[name] = value

        journal = request.app[STORE_KEY]
        try:
            trade = submit_trade_entry(journal, fields["ticker"], fields["tvh"], fields["sl"])
        except EntryError as e:
            logger.warning(f"Rejected trade entry: {e}")
            return web.json_response({"error": str(e), "field": e.field}, status=400)

        row = dict(trade.to_row(), index=len(journal) - 1)
        return web.json_response(row, status=201)

    async def handle_delete(request):
        body = await _read_json(request)
        indices = body.get("indices") if body is not None else None
        if not isinstance(indices, list) or not all(
            isinstance(i, int) and not isinstance(i, bool) for i in indices
        ):
            return web.json_response({"error": "indices must be a list of integers"}, status=400)

        try:
            deleted = request.app[STORE_KEY].delete_trade(indices)
        except InvalidIndexError as e:
            logger.warning(f"Rejected delete: {e}")
            return web.json_response({"error": str(e)}, status=400)

        return web.json_response({"deleted": deleted})

    app = web.Application()
    app[STORE_KEY] = store
    app.router.add_get("/", handle_index)
    app.router.add_get("/api/trades", handle_list)
    app.router.add_get("/api/stats", handle_stats)
    app.router.add_post("/api/trades", handle_add)
    app.router.add_delete("/api/trades", handle_delete)

    return app


async def _read_json(request) -> Any:
    """Decoded JSON object body, or None when absent or malformed."""
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _generate_html(title: str, columns: List[Dict[str, str]]) -> str:
    """Generate the HTML page for the journal."""

    headers_html = "\n".join(f'<th>{col["label"]}</th>' for col in columns)

    cell_template = " + ".join(
        f'`<td>${{formatCell(row, "{col["key"]}", "{col.get("format", "")}")}}</td>`'
        for col in columns
    )

    return f"""<!DOCTYPE html>
<html>
<head>
    <title>{title}</title>
    <style>
        * {{ box-sizing: border-box; margin: 0; padding: 0; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #1a1a2e;
            color: #eee;
            min-height: 100vh;
        }}
        header {{
            background: linear-gradient(135deg, #16213e 0%, #1a1a2e 100%);
            padding: 20px 30px;
            border-bottom: 1px solid #333;
        }}
        header h1 {{ font-weight: 500; color: #fff; }}
        header h1 span {{ color: #4ecca3; }}
        .container {{ padding: 20px 30px; }}
        .stats {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
            gap: 15px;
            margin-bottom: 25px;
        }}
        .stat-card {{
            background: #16213e;
            padding: 20px;
            border-radius: 8px;
            text-align: center;
        }}
        .stat-card .value {{ font-size: 24px; font-weight: 600; color: #4ecca3; }}
        .stat-card .label {{ font-size: 12px; color: #888; margin-top: 5px; text-transform: uppercase; }}
        .card {{
            background: #16213e;
            border-radius: 8px;
            overflow: hidden;
            margin-bottom: 25px;
        }}
        .card-header {{
            padding: 15px 20px;
            background: #0f3460;
            font-weight: 600;
        }}
        form {{ display: flex; gap: 10px; padding: 15px 20px; flex-wrap: wrap; }}
        input {{ background: #1a1a2e; color: #eee; border: 1px solid #333; padding: 8px 10px; border-radius: 4px; }}
        button {{ background: #0f3460; color: #eee; border: none; padding: 8px 14px; border-radius: 4px; cursor: pointer; }}
        .error {{ color: #ff6b6b; padding: 0 20px 15px; min-height: 1em; }}
        table {{ width: 100%; border-collapse: collapse; }}
        th, td {{ padding: 12px 15px; text-align: left; }}
        th {{ background: rgba(0,0,0,0.2); font-size: 11px; text-transform: uppercase; color: #888; }}
        tr:not(:last-child) td {{ border-bottom: 1px solid #333; }}
        .green {{ color: #4ecca3; }}
        .yellow {{ color: #f7d060; }}
        .red {{ color: #ff6b6b; }}
        .empty {{ padding: 30px; text-align: center; color: #666; }}
    </style>
</head>
<body>
    <header>
        <h1><span>Journal</span> {title}</h1>
    </header>
    <div class="container">
        <div class="stats" id="stats"></div>
        <div class="card">
            <div class="card-header">Add Trade</div>
            <form id="add-form">
                <input name="ticker" placeholder="Ticker">
                <input name="tvh" placeholder="TVH" inputmode="decimal">
                <input name="sl" placeholder="SL" inputmode="decimal">
                <button type="submit">Save</button>
            </form>
            <div class="error" id="error"></div>
        </div>
        <div class="card">
            <div class="card-header">Trades</div>
            <table>
                <thead><tr>{headers_html}<th></th></tr></thead>
                <tbody id="table-body"></tbody>
            </table>
        </div>
    </div>
    <script>
        function escapeHtml(text) {{
            const el = document.createElement('span');
            el.textContent = String(text);
            return el.innerHTML;
        }}

        function formatCell(row, key, format) {{
            const value = row[key];
            if (format === 'risk') {{
                const text = value === null ? 'inf' : value.toFixed(2);
                return `<span class="${{row.color}}">${{text}}%</span>`;
            }}
            if (value === null || value === undefined) return '-';
            if (format === 'price') return value.toFixed(2);
            return escapeHtml(value);
        }}

        async function refresh() {{
            const stats = await fetch('/api/stats').then(r => r.json());
            document.getElementById('stats').innerHTML = Object.entries(stats).map(([key, value]) => `
                <div class="stat-card">
                    <div class="value">${{escapeHtml(value)}}</div>
                    <div class="label">${{key.replace(/_/g, ' ')}}</div>
                </div>
            `).join('');

            const rows = await fetch('/api/trades').then(r => r.json());
            const tbody = document.getElementById('table-body');
            if (rows.length === 0) {{
                tbody.innerHTML = '<tr><td colspan="{len(columns) + 1}" class="empty">No trades</td></tr>';
            }} else {{
                tbody.innerHTML = rows.map(row =>
                    `<tr>${{{cell_template}}}<td><button onclick="removeTrade(${{row.index}})">Delete</button></td></tr>`
                ).join('');
            }}
        }}

        async function removeTrade(index) {{
            await fetch('/api/trades', {{
                method: 'DELETE',
                headers: {{'Content-Type': 'application/json'}},
                body: JSON.stringify({{indices: [index]}}),
            }});
            refresh();
        }}

        document.getElementById('add-form').addEventListener('submit', async (event) => {{
            event.preventDefault();
            const form = event.target;
            const response = await fetch('/api/trades', {{
                method: 'POST',
                headers: {{'Content-Type': 'application/json'}},
                body: JSON.stringify({{ticker: form.ticker.value, tvh: form.tvh.value, sl: form.sl.value}}),
            }});
            const errorEl = document.getElementById('error');
            if (response.ok) {{
                form.reset();
                errorEl.textContent = '';
            }} else {{
                errorEl.textContent = (await response.json()).error;
            }}
            refresh();
        }});

        refresh();
        setInterval(refresh, 1000);
    </script>
</body>
</html>
"""


def run_journal_ui(
    store: TradeStore,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    open_browser: bool = True,
) -> None:
    """
    Run the journal web server until interrupted.

    Args:
        store: Store to display and edit
        host: Interface to bind (default localhost)
        port: Server port (default 8080)
        open_browser: Whether to open browser automatically
    """
    app = create_journal_app(store)

    if open_browser:
        # Open browser after short delay to let server start
        async def open_browser_task():
            await asyncio.sleep(0.5)
            webbrowser.open(f"http://{host}:{port}")

        async def on_startup(app):
            asyncio.create_task(open_browser_task())

        app.on_startup.append(on_startup)

    logger.info(f"Trade journal running at http://{host}:{port}")
    print(f"Trade journal running at http://{host}:{port}")
    print("Press Ctrl+C to stop")
    web.run_app(app, host=host, port=port, print=None)
