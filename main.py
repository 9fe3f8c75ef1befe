"""
CLI entry point for the tensor scale-and-render demonstration.

Usage with a single demonstration:
    python main.py -c configuration.toml

Usage with several demonstrations:
    python main.py -c configuration.toml --batch
"""
import argparse
import logging

from src.domain.entities.tensor import Tensor
from src.domain.use_cases.scale_and_render import ScaleAndRender
from src.infrastructure.configuration import (
    BatchDemoConfiguration,
    DemoConfiguration,
)
from src.infrastructure.logging import setup_logging
from src.infrastructure.writers import StreamTensorWriter

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Fill a tensor, scale it and print both versions."
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        default="configuration.toml",
        help="Path to demonstration configuration TOML file (default: configuration.toml)",
    )
    parser.add_argument(
        "--batch",
        action="store_true",
        help="Run every [[demo.runs]] entry instead of the single [demo] table",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable DEBUG logging",
    )
    return parser.parse_args(argv)


def run_demo(config: DemoConfiguration, writer: StreamTensorWriter) -> Tensor:
    """
    Run one demonstration described by `config`.

    Parameters
    ----------
    config : DemoConfiguration
        Shape, element type, fill value and scalar of the demonstration.
    writer : StreamTensorWriter
        Destination for the rendered tensors.

    Returns
    -------
    Tensor
        The scaled tensor.
    """
    use_case = ScaleAndRender(
        rows=config.rows,
        cols=config.cols,
        element_type=config.element_type,
        fill_value=config.fill_value,
        scalar=config.scalar,
        writer=writer,
        reflected=config.reflected,
    )
    return use_case.run()


def main(config_path: str = None, batch: bool = False, debug: bool = False):
    # 1. Setup Logging
    setup_logging(logging.DEBUG if debug else logging.INFO)

    # 2. Load Configuration
    if config_path is None:
        config_path = "configuration.toml"
    if batch:
        configs = BatchDemoConfiguration.load(config_path).runs
    else:
        configs = [DemoConfiguration.load(config_path)]

    # 3. Run demonstrations
    writer = StreamTensorWriter()
    results = []
    for index, config in enumerate(configs, start=1):
        logger.info(f"Running demonstration {index}/{len(configs)}")
        try:
            results.append(run_demo(config, writer))
        except Exception as error:
            logger.error(f"Demonstration {index} failed: {error}")
            raise error

    logger.info("All demonstrations completed.")
    return results


if __name__ == "__main__":
    args = parse_args()
    main(config_path=args.config, batch=args.batch, debug=args.debug)
