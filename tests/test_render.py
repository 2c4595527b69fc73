"""Tests for HTML rendering."""

from simple_todos.models import Filter, Task
from simple_todos.projection import project
from simple_todos.render import (
    HtmlRenderer,
    escape_html,
    items_left_label,
    render_item,
    render_listing,
    render_page,
)


def test_escape_html() -> None:
    assert escape_html("<a href=\"x\">Tom & 'Jerry'</a>") == (
        "&lt;a href=&#34;x&#34;&gt;Tom &amp; &#39;Jerry&#39;&lt;/a&gt;"
    )


def test_render_item_escapes_title_and_id() -> None:
    task = Task(id='a"b', title="<script>alert(1)</script>", created_at=1)
    html = str(render_item(task))
    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert 'data-id="a&#34;b"' in html


def test_render_item_completed() -> None:
    html = str(render_item(Task(id="1", title="Done", completed=True, created_at=1)))
    assert 'class="todo completed"' in html
    assert " checked" in html


def test_render_item_active() -> None:
    html = str(render_item(Task(id="1", title="Open", created_at=1)))
    assert 'class="todo"' in html
    assert "checked" not in html


def test_items_left_label() -> None:
    assert items_left_label(0) == "0 items left"
    assert items_left_label(1) == "1 item left"
    assert items_left_label(3) == "3 items left"


def test_render_listing_disables_clear_without_completed() -> None:
    tasks = [Task(id="1", title="Open", created_at=1)]
    html = str(render_listing(project(tasks, "all"), Filter.ALL))
    assert '<button id="clear-completed" disabled>' in html
    assert "1 item left" in html


def test_render_listing_marks_active_filter() -> None:
    tasks = [Task(id="1", title="Done", completed=True, created_at=1)]
    html = str(render_listing(project(tasks, "completed"), Filter.COMPLETED))
    assert '<button id="clear-completed">' in html
    assert 'class="filter is-active" data-filter="completed" aria-selected="true"' in html
    assert 'data-filter="all" aria-selected="false"' in html


def test_render_page() -> None:
    html = render_page(render_listing(project([], "all"), Filter.ALL))
    assert html.startswith("<!doctype html>")
    assert '<ul id="todo-list"></ul>' in html


def test_html_renderer_keeps_latest_listing() -> None:
    renderer = HtmlRenderer()
    renderer(project([Task(id="1", title="Milk", created_at=1)], "all"), Filter.ALL)
    assert "Milk" in renderer.html
    assert renderer.renders == 1


def test_render_page_wires_controls_to_api() -> None:
    """Test that the page script drives every control through the JSON API."""
    html = render_page(render_listing(project([], "all"), Filter.ALL))
    assert '<div id="listing"><ul id="todo-list">' in html
    assert "<script>" in html
    for fragment in [
        'addEventListener("submit"',
        'addEventListener("change"',
        'addEventListener("dblclick"',
        'e.key === "Enter"',
        'e.key === "Escape"',
        'addEventListener("blur"',
        'call("POST", "/api/todos", { title })',
        'call("PUT", "/api/filter"',
        'call("POST", "/api/todos/clear-completed")',
        'call("DELETE", "/api/todos/"',
        'call("PATCH", "/api/todos/"',
        'fetch("/listing")',
    ]:
        assert fragment in html
