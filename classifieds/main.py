import asyncio
import logging
import sys

import gradio as gr

from classifieds.config import settings
from classifieds.schemas import Listing, SavedSearch
from classifieds.services.session import Session

session = Session()
# Stand-in for the profile's saved-search list.
saved_searches: list[SavedSearch] = []


def setup_logging() -> None:
    level = logging.DEBUG if settings.debug_log else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def render_listings(listings: list[Listing]) -> str:
    if not listings:
        return "### No Listings Found\nTry adjusting your search or location filters."
    lines = []
    for listing in listings:
        badge = " ⭐" if listing.featured else ""
        place = ", ".join(x for x in [listing.location.city, listing.location.state] if x)
        lines.append(f"- **{listing.title}**{badge} | {listing.price} | {place}")
    return "\n".join(lines)


def _subcategory_choices() -> list[tuple[str, str]]:
    return [(sub.name, sub.id) for sub in session.catalog.subcategories_of(session.state.main_category)]


def _view() -> tuple:
    chips = session.visible_chips()
    status = "Fetching suggestions..." if session.busy else ""
    return (
        render_listings(session.visible_listings()),
        gr.update(choices=chips, value=session.state.active_facets),
        status,
    )


async def _settled_view():
    coordinator = session.coordinator
    try:
        await session.wait_for_suggestions(coordinator.debounce_seconds + coordinator.timeout_seconds + 1.0)
    except asyncio.TimeoutError:
        pass
    return _view()


# Handlers are all coroutines so Session changes stay on the event loop thread.


async def on_term(term: str):
    session.set_term(term)
    yield _view()
    yield await _settled_view()


async def on_main_category(category_id: str | None):
    session.select_main_category(category_id or None)
    sub_update = gr.update(choices=_subcategory_choices(), value=None)
    yield (*_view(), sub_update)
    yield (*(await _settled_view()), sub_update)


async def on_sub_category(subcategory_id: str | None):
    session.select_sub_category(subcategory_id or None)
    main_update = gr.update(value=session.state.main_category)
    yield (*_view(), main_update)
    yield (*(await _settled_view()), main_update)


async def on_state(state: str | None):
    session.select_state(state or None)
    return (*_view(), gr.update(choices=session.cities(), value=None))


async def on_city(city: str | None):
    session.select_city(city or None)
    return _view()


async def on_chips(selected: list[str]):
    active = set(session.state.active_facets)
    for facet in active.symmetric_difference(selected or []):
        session.toggle_facet(facet)
    return _view()


async def on_save(name: str):
    if not session.is_search_active():
        return gr.update(), "Nothing to save yet."
    record = session.save_search(name)
    if record is None:
        return gr.update(), "Enter a name for this search."
    saved_searches.append(record)
    return gr.update(choices=[(s.name, s.id) for s in saved_searches]), f"Saved '{record.name}'."


async def on_open(search_id: str | None):
    record = next((s for s in saved_searches if s.id == search_id), None)
    if record is None:
        yield (*_view(), gr.update(), gr.update(), gr.update(), gr.update(), gr.update())
        return
    state = session.open_saved_search(record)
    updates = (
        gr.update(value=state.search_term),
        gr.update(value=state.main_category),
        gr.update(choices=_subcategory_choices(), value=state.sub_category),
        gr.update(value=state.state),
        gr.update(choices=session.cities(), value=state.city),
    )
    yield (*_view(), *updates)
    yield (*(await _settled_view()), *updates)


def build_demo() -> gr.Blocks:
    categories = [(c.name, c.id) for c in session.catalog.categories()]
    with gr.Blocks(title="Classifieds") as demo:
        gr.Markdown(f"# Latest Classifieds\nBuy & sell anything in {session.catalog.country}.")
        with gr.Row():
            term = gr.Textbox(label="What are you looking for?")
            state = gr.Dropdown(choices=session.catalog.states(), label="State", value=None)
            city = gr.Dropdown(choices=[], label="City / LGA", value=None)
        with gr.Row():
            main_category = gr.Dropdown(choices=categories, label="Category", value=None)
            sub_category = gr.Dropdown(choices=[], label="Subcategory", value=None)
        chips = gr.CheckboxGroup(choices=[], label="AI Suggestions")
        status = gr.Markdown()
        with gr.Row():
            search_name = gr.Textbox(label="Search name")
            save = gr.Button("Save Search")
            saved = gr.Dropdown(choices=[], label="Saved searches", value=None)
            open_saved = gr.Button("Open")
        notice = gr.Markdown()
        listings = gr.Markdown(render_listings(session.visible_listings()))

        view = [listings, chips, status]
        term.input(on_term, inputs=term, outputs=view, concurrency_limit=None)
        main_category.input(on_main_category, inputs=main_category, outputs=view + [sub_category], concurrency_limit=None)
        sub_category.input(on_sub_category, inputs=sub_category, outputs=view + [main_category], concurrency_limit=None)
        state.input(on_state, inputs=state, outputs=view + [city])
        city.input(on_city, inputs=city, outputs=view)
        chips.input(on_chips, inputs=chips, outputs=view)
        save.click(on_save, inputs=search_name, outputs=[saved, notice])
        open_saved.click(
            on_open,
            inputs=saved,
            outputs=view + [term, main_category, sub_category, state, city],
            concurrency_limit=None,
        )
    return demo


if __name__ == "__main__":
    setup_logging()
    app = build_demo()
    app.launch(server_name=settings.gradio_server_name, server_port=settings.gradio_server_port)
