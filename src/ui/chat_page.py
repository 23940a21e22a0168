"""NiceGUI chat page for the S3 file retriever.

Renders controller state and forwards widget events to controller intents.
All sequencing lives in the controller; this module only redraws.
"""

from nicegui import events, ui

from src.config import get_client_config
from src.gateway.client import RemoteGateway
from src.models.schemas import Message, Role
from src.state.controller import InteractionController
from src.ui import projection

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; }

    .sidebar { background: #1f2937; color: white; }

    .chat-item { border-radius: 8px; cursor: pointer; transition: background 0.2s; }
    .chat-item:hover { background: rgba(255, 255, 255, 0.08); }
    .chat-item.active { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .message-user {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #667eea;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .upload-error { color: #b91c1c; background: #fee2e2; border-radius: 8px; }
</style>
"""


@ui.page("/")
async def chat_page() -> None:
    """Main chat page; one controller per browser tab."""
    config = get_client_config()
    ui.add_head_html(CUSTOM_CSS)
    ui.page_title(config.app_title)

    gateway = RemoteGateway(config)
    controller = InteractionController(gateway)
    ui.context.client.on_disconnect(gateway.aclose)

    title_dialog: ui.dialog
    upload_dialog: ui.dialog
    files_drawer: ui.right_drawer
    files_button: ui.button

    def sync() -> None:
        """Redraw every section from controller state."""
        chat_list.refresh()
        main_area.refresh()
        files_list.refresh()
        upload_body.refresh()
        files_button.set_text(projection.files_toggle_label(controller))
        files_drawer.value = controller.view.file_panel_visible
        title_dialog.value = controller.view.title_modal_open
        upload_dialog.value = controller.view.upload_modal_open

    controller.on_change = sync

    # === Intents ===

    def open_title_modal() -> None:
        controller.open_title_modal()
        sync()

    def cancel_title_modal() -> None:
        controller.cancel_title_modal()
        sync()

    def open_upload_modal() -> None:
        controller.open_upload_modal()
        sync()

    def close_upload_modal() -> None:
        controller.close_upload_modal()
        sync()

    def toggle_file_panel() -> None:
        controller.toggle_file_panel()
        sync()

    def close_file_panel() -> None:
        controller.close_file_panel()
        sync()

    async def select_chat(chat_id) -> None:
        await controller.select_chat(chat_id)

    async def delete_chat(chat_id) -> None:
        if not await controller.delete_chat(chat_id):
            ui.notify("Could not delete chat", type="negative")

    async def send_message() -> None:
        await controller.send_message()

    async def submit_title() -> None:
        if not await controller.create_chat():
            ui.notify("Could not create chat", type="negative")

    async def handle_file_picked(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        controller.stage_upload(e.file.name, content, e.file.content_type)
        picker.reset()
        sync()

    async def submit_upload() -> None:
        result = await controller.submit_upload()
        if result is not None and result.success:
            ui.notify(projection.UPLOAD_SUCCESS_NOTICE, type="positive")

    def download_file(url: str) -> None:
        ui.navigate.to(url, new_tab=True)

    # === Rendering ===

    def render_message(msg: Message) -> None:
        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                ui.icon("smart_toy").classes("text-2xl text-gray-500")
            with ui.column().classes("max-w-[70%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    ui.label(msg.content).classes("text-sm leading-relaxed whitespace-pre-wrap")
                ui.label(projection.format_time(msg.timestamp)).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                ui.icon("person").classes("text-2xl text-indigo-500")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            ui.icon("smart_toy").classes("text-2xl text-gray-500")
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def render_welcome() -> None:
        with ui.column().classes("w-full h-full items-center justify-center gap-3 p-8"):
            ui.icon("smart_toy").classes("text-6xl text-indigo-400")
            ui.label("S3 File Retrieval Chatbot").classes("text-2xl font-semibold")
            ui.label("Ask me to find files from your S3 bucket!").classes("text-gray-600")
            ui.label("Examples:").classes("text-sm text-gray-400 mt-4")
            for example in projection.WELCOME_EXAMPLES:
                ui.label(f'"{example}"').classes("text-sm text-gray-600 italic")
            ui.button("Start New Conversation", on_click=open_title_modal).props(
                "unelevated color=indigo"
            ).classes("mt-4")

    @ui.refreshable
    def chat_list() -> None:
        for chat in controller.directory:
            active = "active" if projection.is_active_chat(controller, chat.id) else ""
            with ui.row().classes(
                f"chat-item {active} w-full items-center justify-between px-3 py-2 no-wrap"
            ).on("click", lambda _, chat_id=chat.id: select_chat(chat_id)):
                with ui.column().classes("gap-0 min-w-0"):
                    ui.label(chat.title).classes("text-sm truncate")
                    ui.label(projection.format_date(chat.created_at)).classes(
                        "text-[10px] text-white/60"
                    )
                # click.stop keeps the row from selecting the chat being deleted
                ui.button(icon="delete").props("flat round dense size=sm color=white").on(
                    "click.stop", lambda _, chat_id=chat.id: delete_chat(chat_id)
                )

    @ui.refreshable
    def main_area() -> None:
        if controller.session.is_welcome:
            render_welcome()
            return

        with ui.scroll_area().classes("flex-grow w-full bg-gray-50"):
            with ui.column().classes("w-full p-5 gap-4"):
                if not controller.session.messages:
                    ui.label(projection.EMPTY_CHAT_HINT).classes(
                        "w-full text-center text-gray-400 mt-16"
                    )
                for msg in controller.session.messages:
                    render_message(msg)
                if projection.show_typing_indicator(controller):
                    render_typing_indicator()

        with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t no-wrap"):
            message_input = (
                ui.input(placeholder="Ask about files in your S3 bucket...")
                .bind_value(controller.view, "message_draft")
                .props("outlined dense")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            message_input.set_enabled(not projection.input_disabled(controller))
            ui.button(
                icon=projection.send_button_icon(controller),
                on_click=send_message,
            ).props("round unelevated color=indigo").bind_enabled_from(
                controller.view,
                "message_draft",
                backward=lambda _: not projection.send_disabled(controller),
            )

    @ui.refreshable
    def files_list() -> None:
        if not controller.files.files:
            ui.label(projection.NO_FILES_HINT).classes("text-sm text-gray-400")
            return
        for f in controller.files.files:
            with ui.row().classes("w-full items-center gap-2 no-wrap py-2 border-b"):
                ui.icon("description").classes("text-2xl text-gray-500")
                with ui.column().classes("gap-0 flex-grow min-w-0"):
                    ui.label(f.key).classes("text-sm truncate")
                    ui.label(
                        f"{projection.format_size_kb(f.size)} • "
                        f"{projection.format_date(f.last_modified)}"
                    ).classes("text-[10px] text-gray-400")
                ui.button(
                    icon="download", on_click=lambda _, url=f.url: download_file(url)
                ).props("flat round dense")

    @ui.refreshable
    def upload_body() -> None:
        caption = projection.staged_file_caption(controller)
        if caption:
            with ui.row().classes("items-center gap-2"):
                ui.icon("picture_as_pdf").classes("text-red-500")
                ui.label(caption).classes("text-sm")
        else:
            ui.label("No file selected").classes("text-sm text-gray-400")

        error = projection.upload_error(controller)
        if error:
            ui.label(f"⚠️ {error}").classes("upload-error text-sm px-3 py-2 w-full")

        with ui.row().classes("w-full justify-end gap-2 mt-2"):
            cancel = ui.button("Cancel", on_click=close_upload_modal).props("flat")
            cancel.set_enabled(not controller.view.is_uploading)
            submit = ui.button(
                projection.upload_submit_label(controller), on_click=submit_upload
            ).props("unelevated color=indigo")
            submit.set_enabled(not projection.upload_submit_disabled(controller))

    # === Layout ===

    with ui.left_drawer(value=True, fixed=True).classes("sidebar p-0"):
        with ui.column().classes("w-full h-full p-4 gap-3 no-wrap"):
            ui.label(config.app_title).classes("text-lg font-semibold")
            ui.button("+ New Chat", on_click=open_title_modal).props(
                "unelevated color=indigo"
            ).classes("w-full")
            with ui.scroll_area().classes("flex-grow w-full"):
                chat_list()
            ui.button("Upload PDF", icon="upload", on_click=open_upload_modal).props(
                "flat color=white"
            ).classes("w-full")
            files_button = ui.button(
                projection.files_toggle_label(controller),
                icon="folder",
                on_click=toggle_file_panel,
            ).props("flat color=white").classes("w-full")

    with ui.right_drawer(value=False, fixed=True).props("bordered width=320") as files_drawer:
        with ui.row().classes("w-full items-center justify-between"):
            ui.label("Available Files").classes("text-base font-semibold")
            ui.button(icon="close", on_click=close_file_panel).props("flat round dense")
        files_list()

    with ui.column().classes("w-full gap-0").style("height: calc(100vh - 2rem)"):
        main_area()

    with ui.dialog().props("persistent") as title_dialog, ui.card().classes("w-96"):
        ui.label("Create New Chat").classes("text-lg font-semibold")
        ui.label("Enter a title for your chat (optional)").classes("text-sm text-gray-500")
        ui.input(placeholder="Enter chat title...").bind_value(
            controller.view, "title_draft"
        ).props("autofocus outlined dense").classes("w-full").on("keydown.enter", submit_title)
        with ui.row().classes("w-full justify-end gap-2"):
            ui.button("Cancel", on_click=cancel_title_modal).props("flat")
            ui.button("Create Chat", on_click=submit_title).props("unelevated color=indigo")

    with ui.dialog().props("persistent") as upload_dialog, ui.card().classes("w-96"):
        ui.label("Upload PDF to S3").classes("text-lg font-semibold")
        ui.label("Select a PDF file to upload to your S3 bucket").classes(
            "text-sm text-gray-500"
        )
        picker = ui.upload(
            on_upload=handle_file_picked, auto_upload=True, max_files=1
        ).props('accept=".pdf,application/pdf" flat bordered').classes("w-full")
        upload_body()

    await ui.context.client.connected()
    await controller.start()
