import html
import json

from app.processor.models import VerificationOutcome

_STYLE = """
body { font-family: monospace; font-size: 14px; padding: 20px; }
h2 { font-size: 22px; }
h3 { font-size: 17px; margin-top: 16px; }
pre { font-size: 13px; }
.error { color: #b00020; }
"""


def build_fact_sheet(outcome: VerificationOutcome) -> str:
    """Self-contained HTML page stating who was checked, how, and what came back."""
    record = outcome.record
    facts = [
        ("User", record.user_sso),
        ("Account ID", record.account_id),
        ("Project", record.project_key),
        ("Revoked permission", record.access_permission),
        ("Access status", outcome.status.value),
        ("Timestamp", outcome.timestamp),
    ]
    fact_lines = "\n".join(
        f"    <b>{html.escape(label)}:</b> {html.escape(value)}<br>" for label, value in facts
    )
    error_block = ""
    if outcome.authority_error:
        error_block = (
            "\n    <h3>Query Error</h3>\n"
            f'    <p class="error">{html.escape(outcome.authority_error)}</p>'
        )
    response_text = json.dumps(outcome.raw_response, indent=2, ensure_ascii=False)
    return f"""<html>
  <head>
    <meta charset="utf-8">
    <style>{_STYLE}</style>
  </head>
  <body>
    <h2>Bitbucket Access Check</h2>
{fact_lines}
    <h3>REST API URL</h3>
    <p>{html.escape(outcome.query_url)}</p>{error_block}
    <h3>API Response</h3>
    <pre>{html.escape(response_text)}</pre>
  </body>
</html>
"""
