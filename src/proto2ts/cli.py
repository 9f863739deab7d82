import typer
from pathlib import Path
import logging
from typing import Optional

from .descriptor_loader import load_descriptor_file
from .errors import Proto2TSError
from .generator import generate_typescript_code
from .options import parse_options

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

app = typer.Typer()


@app.command()
def main(
    descriptor_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the JSON file holding the enum descriptors.",
    ),
    output_file: Path = typer.Argument(
        ...,
        file_okay=True,
        dir_okay=False,
        writable=True,
        help="Path for the generated TypeScript output file.",
    ),
    opt: Optional[str] = typer.Option(
        None,
        "--opt",
        "-o",
        help="Generation options as comma separated key=value pairs, e.g. 'stringEnums=true,outputJsonMethods=to-only'.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
):
    """Generates TypeScript enums and JSON conversion functions from enum descriptors."""
    log_level = logging.DEBUG if verbose else logging.INFO
    # Force=True is needed because basicConfig was already called at the module level
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s", force=True)

    logging.info(f"Reading enum descriptors from: {descriptor_file}")
    logging.info(f"Writing TypeScript code to: {output_file}")

    try:
        options = parse_options(opt)
        enums = load_descriptor_file(descriptor_file)

        if not enums:
            logging.warning("No enums found in descriptor file. Output file will only hold the header.")

        ts_code = generate_typescript_code(enums, options, source_file=descriptor_file.name)

    except Proto2TSError as e:
        logging.error(f"Failed to generate TypeScript: {e}")
        raise typer.Exit(code=1)
    except OSError as e:
        logging.error(f"Failed to read descriptor file: {e}")
        raise typer.Exit(code=1)

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(ts_code)
        logging.info(f"Successfully generated TypeScript code to {output_file}")
    except OSError as e:
        logging.error(f"Failed to write TypeScript file: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
