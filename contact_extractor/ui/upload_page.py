"""NiceGUI upload interface for contact extraction."""

import httpx
from nicegui import events, ui

from contact_extractor.config import get_config
from contact_extractor.rendering.pdf_renderer import output_filename
from contact_extractor.ui.session import (
    UploadSession,
    api_error_detail,
    preview_lines,
    request_extraction,
    request_render,
)

ACCEPTED_FILES = (
    ".pdf,.doc,.docx,application/pdf,application/msword,"
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

INSTRUCTION_STEPS = (
    "Upload PDF or Word file",
    "Click on Extract Contact Numbers",
    "Download",
    "Refresh page to go home screen",
)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-card {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .action-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }

    .step-number {
        width: 28px; height: 28px;
        background: #667eea;
        color: white;
        border-radius: 50%;
    }

    .contact-item {
        background: #f3f4f6;
        border-radius: 8px;
        font-family: 'Menlo', 'Monaco', monospace;
    }
</style>
"""


@ui.page("/")
def upload_page() -> None:
    """Main upload page."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_config()
    session = UploadSession()

    file_label: ui.label
    results_container: ui.column
    extract_btn: ui.button
    download_btn: ui.button
    spinner: ui.spinner

    def set_loading(loading: bool) -> None:
        session.is_loading = loading
        spinner.set_visibility(loading)
        if loading or not session.has_file:
            extract_btn.disable()
        else:
            extract_btn.enable()
        download_btn.set_visibility(bool(session.numbers))
        if loading:
            download_btn.disable()
        else:
            download_btn.enable()

    def refresh_results() -> None:
        results_container.clear()
        if not session.numbers:
            return
        with results_container:
            ui.label(f"Found {len(session.numbers)} Contact Numbers:").classes(
                "text-base font-semibold"
            )
            for line in preview_lines(session.numbers, config.preview_limit):
                ui.label(line).classes("contact-item w-full px-3 py-1 text-sm")

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        session.select(e.file.name, e.file.content_type, content)
        file_label.set_text(e.file.name)
        refresh_results()
        set_loading(False)

    async def extract() -> None:
        blocker = session.extraction_blocker()
        if blocker is not None:
            ui.notify(blocker, type="warning")
            return

        set_loading(True)
        try:
            async with httpx.AsyncClient(timeout=120.0) as client:
                result = await request_extraction(client, config.api_base_url, session)
        except httpx.HTTPStatusError as e:
            ui.notify(
                f"Error processing file: {api_error_detail(e.response)}", type="negative"
            )
        except httpx.RequestError as e:
            ui.notify(f"Connection failed: {e}", type="negative")
        else:
            if result.numbers:
                ui.notify(result.message, type="positive")
            else:
                ui.notify(result.message, type="warning")
        finally:
            refresh_results()
            set_loading(False)

    async def download() -> None:
        set_loading(True)
        try:
            async with httpx.AsyncClient(timeout=120.0) as client:
                pdf_bytes = await request_render(
                    client, config.api_base_url, session.numbers
                )
        except ValueError as e:
            ui.notify(str(e), type="warning")
        except httpx.HTTPStatusError as e:
            ui.notify(
                f"Error generating PDF: {api_error_detail(e.response)}", type="negative"
            )
        except httpx.RequestError as e:
            ui.notify(f"Connection failed: {e}", type="negative")
        else:
            ui.download.content(pdf_bytes, output_filename(), "application/pdf")
            ui.notify("PDF generated and downloaded successfully!", type="positive")
        finally:
            set_loading(False)

    # === UI Layout ===
    with ui.row().classes("w-full max-w-5xl mx-auto p-4 md:p-8 gap-6 items-start no-wrap"):
        with ui.column().classes("flex-grow app-card overflow-hidden"):
            with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
                ui.icon("contact_phone").classes("text-white text-3xl")
                ui.label("PDF & Word Contact Extractor").classes(
                    "text-lg font-semibold text-white"
                )

            with ui.column().classes("w-full p-5 gap-4"):
                ui.label(
                    "Upload a PDF or Word file to extract contact numbers "
                    "and generate a new PDF"
                ).classes("text-sm text-gray-500")

                ui.upload(
                    on_upload=handle_upload,
                    auto_upload=True,
                    max_files=1,
                    max_file_size=config.max_file_size,
                    label="Drag and drop your PDF or Word file here or click to browse",
                ).props(f'accept="{ACCEPTED_FILES}"').classes("w-full")
                file_label = ui.label("No file selected").classes("text-sm text-gray-600")

                with ui.row().classes("w-full justify-center gap-3"):
                    extract_btn = ui.button(
                        "Extract Contact Numbers", on_click=extract
                    ).classes("action-btn text-white")
                    download_btn = ui.button("Download PDF", on_click=download).classes(
                        "action-btn text-white"
                    )
                    spinner = ui.spinner(size="lg")

                results_container = ui.column().classes("w-full gap-1")

        with ui.column().classes("w-72 app-card p-5 gap-3"):
            ui.label("How to Use").classes("text-base font-semibold")
            for index, step in enumerate(INSTRUCTION_STEPS, start=1):
                with ui.row().classes("items-center gap-3 no-wrap"):
                    ui.label(str(index)).classes(
                        "step-number flex items-center justify-center text-xs"
                    )
                    ui.label(step).classes("text-sm")

    set_loading(False)


def main() -> None:
    ui.run(title="Contact Extractor", port=get_config().ui_port, reload=False)


if __name__ == "__main__":
    main()
