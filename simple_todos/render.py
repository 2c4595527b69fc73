"""HTML rendering of a projection.

Everything interpolated into markup goes through :func:`markupsafe.escape`.
"""

from markupsafe import Markup, escape

from simple_todos.models import Filter, Projection, Task

FILTER_LABELS: dict[Filter, str] = {
    Filter.ALL: "All",
    Filter.ACTIVE: "Active",
    Filter.COMPLETED: "Completed",
}


def render_item(task: Task) -> Markup:
    """One ``<li>`` for a task, keyed by ``data-id``."""
    css = "todo completed" if task.completed else "todo"
    checked = " checked" if task.completed else ""
    return Markup(
        '<li class="{css}" data-id="{id}">'
        '<input class="toggle" type="checkbox"{checked} aria-label="Toggle completed" />'
        '<span class="title">{title}</span>'
        '<span class="actions">'
        '<button class="edit" aria-label="Edit">Edit</button>'
        '<button class="delete" aria-label="Delete">Delete</button>'
        "</span>"
        "</li>"
    ).format(css=css, id=task.id, checked=Markup(checked), title=task.title)


def items_left_label(remaining: int) -> str:
    noun = "item" if remaining == 1 else "items"
    return f"{remaining} {noun} left"


def render_filters(active: Filter) -> Markup:
    buttons = []
    for value, label in FILTER_LABELS.items():
        selected = value == active
        buttons.append(
            Markup(
                '<button class="filter{cls}" data-filter="{value}" aria-selected="{sel}">'
                "{label}</button>"
            ).format(
                cls=" is-active" if selected else "",
                value=value.value,
                sel="true" if selected else "false",
                label=label,
            )
        )
    return Markup("").join(buttons)


def render_listing(projection: Projection, active: Filter) -> Markup:
    """The list, the remaining counter, the filters and the clear button."""
    items = Markup("").join(render_item(t) for t in projection.items)
    disabled = "" if projection.any_completed else " disabled"
    return Markup(
        '<ul id="todo-list">{items}</ul>'
        "<footer>"
        '<span id="items-left">{left}</span>'
        '<nav class="filters">{filters}</nav>'
        '<button id="clear-completed"{disabled}>Clear completed</button>'
        "</footer>"
    ).format(
        items=items,
        left=items_left_label(projection.remaining),
        filters=render_filters(active),
        disabled=Markup(disabled),
    )


PAGE_SCRIPT = Markup(
    """
(() => {
  const listing = document.getElementById("listing");
  const form = document.getElementById("todo-form");
  const input = document.getElementById("new-todo");

  async function call(method, url, body) {
    const init = { method, headers: { "Content-Type": "application/json" } };
    if (body !== undefined) init.body = JSON.stringify(body);
    await fetch(url, init);
    const response = await fetch("/listing");
    listing.innerHTML = await response.text();
  }

  function itemId(el) {
    const item = el.closest("[data-id]");
    return item ? item.getAttribute("data-id") : null;
  }

  function startEdit(id, titleEl) {
    const editor = document.createElement("input");
    editor.type = "text";
    editor.value = titleEl.textContent;
    titleEl.replaceWith(editor);
    editor.focus();
    editor.select();
    let done = false;
    const finish = (commit) => {
      if (done) return;
      done = true;
      if (commit) {
        call("PATCH", "/api/todos/" + encodeURIComponent(id), { title: editor.value });
      } else {
        call("GET", "/api/todos");
      }
    };
    editor.addEventListener("keydown", (e) => {
      if (e.key === "Enter") finish(true);
      if (e.key === "Escape") finish(false);
    });
    editor.addEventListener("blur", () => finish(true));
  }

  form.addEventListener("submit", (e) => {
    e.preventDefault();
    const title = input.value;
    input.value = "";
    call("POST", "/api/todos", { title });
  });

  listing.addEventListener("click", (e) => {
    const target = e.target;
    if (target.matches("button.filter")) {
      call("PUT", "/api/filter", { filter: target.dataset.filter });
    } else if (target.matches("#clear-completed")) {
      call("POST", "/api/todos/clear-completed");
    } else if (target.matches("button.delete")) {
      call("DELETE", "/api/todos/" + encodeURIComponent(itemId(target)));
    } else if (target.matches("button.edit")) {
      const titleEl = target.closest("[data-id]").querySelector(".title");
      if (titleEl) startEdit(itemId(target), titleEl);
    }
  });

  listing.addEventListener("change", (e) => {
    if (e.target.matches("input.toggle")) {
      call("PATCH", "/api/todos/" + encodeURIComponent(itemId(e.target)), {
        completed: e.target.checked,
      });
    }
  });

  listing.addEventListener("dblclick", (e) => {
    const titleEl = e.target.closest(".title");
    if (titleEl) startEdit(itemId(titleEl), titleEl);
  });
})();
"""
)


def render_page(listing: Markup, title: str = "Todos") -> str:
    """A complete HTML document around an already rendered listing."""
    return str(
        Markup(
            "<!doctype html>"
            '<html><head><meta charset="utf-8" /><title>{title}</title></head>'
            "<body><main>"
            "<h1>{title}</h1>"
            '<form id="todo-form"><input id="new-todo" name="title" autocomplete="off" /></form>'
            '<div id="listing">{listing}</div>'
            "</main>"
            "<script>{script}</script>"
            "</body></html>"
        ).format(title=title, listing=listing, script=PAGE_SCRIPT)
    )


def escape_html(text: str) -> str:
    """Escape text for inclusion in markup."""
    return str(escape(text))


class HtmlRenderer:
    """Controller renderer that keeps the latest rendered listing.

    The page and the ``/listing`` fragment both serve :attr:`html`.
    """

    def __init__(self) -> None:
        self.html = Markup("")
        self.renders = 0

    def __call__(self, projection: Projection, active: Filter) -> None:
        self.html = render_listing(projection, active)
        self.renders += 1
