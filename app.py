import logging

import gradio as gr
import uvicorn

from json2csv_web.api import app as api_app
from json2csv_web.config import example_path, log_level, server_host, server_port
from json2csv_web.handlers import convert_and_preview_handler, export_csv_handler, load_uploaded_json
from json2csv_web.io_utils import load_example_json

logging.basicConfig(level=log_level())
logger = logging.getLogger(__name__)


def load_example():
    return load_example_json(example_path())


# --- UI Definition ---
with gr.Blocks(title="JSON2CSV") as demo:
    gr.Markdown("# JSON2CSV")
    gr.Markdown(
        "Paste or upload a JSON array of objects and convert it to CSV. "
        "Columns come from the keys of the first object."
    )

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Input")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            json_input = gr.Textbox(label="JSON", lines=16, max_lines=40, placeholder='[{"id": 1, "nome": "Produto A"}]')
            delimiter_input = gr.Textbox(label="Separator", value=",", max_lines=1)
            convert_btn = gr.Button("Convert", variant="primary")

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 2. Result")
            status_msg = gr.Textbox(label="Status", interactive=False)
            csv_output = gr.Textbox(label="CSV", lines=16, max_lines=40, interactive=False)
            preview = gr.Dataframe(label="Preview (first rows)", interactive=False)

            gr.Markdown("### 3. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
            export_btn = gr.Button("Export CSV")
            download_output = gr.File(label="Download Result")

    demo.load(fn=load_example, outputs=[json_input])

    file_input.upload(
        fn=load_uploaded_json,
        inputs=[file_input],
        outputs=[json_input, status_msg],
    )

    convert_btn.click(
        fn=convert_and_preview_handler,
        inputs=[json_input, delimiter_input],
        outputs=[csv_output, status_msg, preview],
    )

    export_btn.click(
        fn=export_csv_handler,
        inputs=[json_input, delimiter_input, output_filename],
        outputs=[download_output, status_msg],
    )

app = gr.mount_gradio_app(api_app, demo, path="/")

if __name__ == "__main__":
    host, port = server_host(), server_port()
    logger.info("Starting JSON2CSV on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
