"""Search form markup and the browser-side matching script.

Two forms are produced: the inline box placed in page headers and the box on
the results page, which also carries the `#search-results` container and the
script that fetches the index and filters it. Configuration values are
HTML-escaped; a blank value renders as an empty attribute.
"""
from __future__ import annotations

import json
from html import escape
from typing import Any, Mapping, Optional

from ..domain.entities.search import SearchConfig


RESULTS_CONTAINER_ID = 'search-results'

# Same semantics as domain.services.query_matcher: the whole index is validated
# before anything renders, a missing parameter is the empty term, output is
# cleared before rendering, fetch/parse errors are shown.
_RESULTS_SCRIPT = """<script>(async function () {
    const outputFile = %(output_file)s;
    const searchParam = %(search_param)s;
    const container = document.querySelector("#%(container_id)s");
    const input = document.querySelector(".search-page-input");
    const notice = function (text, className) {
        const p = document.createElement("p");
        if (className) {
            p.className = className;
        }
        p.textContent = text;
        container.appendChild(p);
    };

    container.innerHTML = "";

    let index;
    try {
        const response = await fetch("./" + outputFile);
        if (!response.ok) {
            throw new Error("HTTP " + response.status);
        }
        index = await response.json();
        if (!index || typeof index !== "object" || Array.isArray(index) || !Array.isArray(index.items)) {
            throw new Error("invalid search index");
        }
        index.items.forEach(function (item, position) {
            if (!item || typeof item.title !== "string" ||
                    typeof item.summary !== "string" || typeof item.url !== "string") {
                throw new Error("invalid search index item " + position);
            }
        });
    } catch (error) {
        console.error("Search unavailable:", error);
        notice("Search is currently unavailable.", "search-error");
        return;
    }

    const term = new URLSearchParams(window.location.search).get(searchParam) || "";
    input.value = term;

    const needle = term.toLowerCase();
    const results = index.items.filter(function (item) {
        return item.title.toLowerCase().includes(needle) ||
            item.summary.toLowerCase().includes(needle);
    });

    if (results.length === 0) {
        notice("No Results Found");
        return;
    }

    results.forEach(function (item) {
        const heading = document.createElement("h5");
        const link = document.createElement("a");
        link.href = item.url;
        link.textContent = item.title;
        heading.appendChild(link);
        const summary = document.createElement("p");
        summary.textContent = item.summary;
        container.appendChild(heading);
        container.appendChild(summary);
    });
})();
</script>"""


def _attr(value: Any) -> str:
    return escape('' if value is None else str(value), quote=True)


def _js_string(value: str) -> str:
    # "</" would close the script element early
    return json.dumps(value).replace('</', '<\\/')


def search_url_from(global_context: Optional[Mapping[str, Any]]) -> str:
    """website.searchUrl from the host global context, or '' when absent"""
    if not global_context:
        return ''
    website = global_context.get('website') or {}
    return website.get('searchUrl') or ''


def render_search_input(config: SearchConfig, search_url: str = '') -> str:
    """Inline search box posting the term to search_url."""
    autofocus = 'autofocus' if config.search_autofocus else ''
    placeholder = _attr(config.search_placeholder)
    return f"""<form action="{_attr(search_url)}" class="search__form">
    <input
        class="search__input"
        type="search"
        name="{_attr(config.search_param)}"
        placeholder="{placeholder}"
        aria-label="{placeholder}"
        {autofocus}
        required
    />
    <button type="submit" class="search__button"><span>
        {escape(config.search_submit_label or '')}</span>
    </button>
</form>"""


def render_results_script(config: SearchConfig) -> str:
    return _RESULTS_SCRIPT % {
        'output_file': _js_string(config.output_file or ''),
        'search_param': _js_string(config.search_param or ''),
        'container_id': RESULTS_CONTAINER_ID,
    }


def render_search_content(config: SearchConfig, search_url: str = '') -> str:
    """Results-page form, the results container and the matching script."""
    return f"""<form action="{_attr(search_url)}" class="search-page-form">
    <input
        type="search"
        name="{_attr(config.search_param)}"
        placeholder="{_attr(config.search_placeholder)}"
        class="search-page-input"
        required
    />
    <button type="submit" class="search-page-button"><span>
        {escape(config.search_submit_label or '')}</span>
    </button>
</form>
<div id="{RESULTS_CONTAINER_ID}"></div>
{render_results_script(config)}"""


__all__ = [
    "render_search_input",
    "render_search_content",
    "render_results_script",
    "search_url_from",
    "RESULTS_CONTAINER_ID",
]
