"""
Diagram Pipeline Module
=======================

Bounded Context: Rendering orchestration.

Design:
- Orchestrator: builds the diagram, runs each selected renderer
- Builder pattern: Fluent configuration
- Fail Fast: unknown renderers rejected at build time, not mid-run
- Renderers are looked up in a RendererRegistry

Dependencies:
- crustacean_shapes.diagram (composite + showcase)
- crustacean_shapes.rendering (console, svg, raster)
- crustacean_shapes.logging (structured events)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from crustacean_shapes.config import DiagramConfig
from crustacean_shapes.diagram import Diagram, showcase_diagram
from crustacean_shapes.logging import LogEvent, StructuredLogger, create_logger
from crustacean_shapes.registry import RendererRegistry
from crustacean_shapes.rendering.console import ConsoleRenderer
from crustacean_shapes.rendering.raster import render_frame, save_frame
from crustacean_shapes.rendering.svg import SVGRenderer
from crustacean_shapes.utils import get_target_run_folder

FILE_RENDERERS = {"svg", "raster"}


def build_diagram(config: DiagramConfig) -> Diagram:
    """
    Diagram described by the config.

    Declared shapes replace the sample diagram; the nest/bubble
    switches apply either way.
    """
    base = None
    if config.shapes:
        base = Diagram(shape.to_drawable() for shape in config.shapes)
    return showcase_diagram(
        config.canvas.frame,
        nest=config.nest_diagram,
        nest_scale=config.nest_scale,
        bubble=config.add_bubble,
        base=base,
    )


def render_console(
    diagram: Diagram,
    config: DiagramConfig,
    output_folder: Optional[Path],
    write: Callable[[str], None] = print,
) -> None:
    """Dump the command stream, framed by the canvas rectangle."""
    renderer = ConsoleRenderer(write=write)
    renderer.rectangle_at(config.canvas.frame)
    write("--- canvas above, diagram below ---")
    diagram.draw(renderer)
    return None


def render_svg(diagram: Diagram, config: DiagramConfig, output_folder: Path) -> Path:
    """Write diagram.svg plus an HTML preview page."""
    renderer = SVGRenderer(
        width=config.svg.width,
        height=config.svg.height,
        background=config.svg.background,
    )
    diagram.draw(renderer)

    output_folder = Path(output_folder)
    output_folder.mkdir(parents=True, exist_ok=True)
    svg_path = output_folder / "diagram.svg"
    svg_path.write_text(renderer.svg_string)
    (output_folder / "diagram.html").write_text(renderer.html_string)
    return svg_path


def render_raster(diagram: Diagram, config: DiagramConfig, output_folder: Path) -> Path:
    """Stroke the diagram onto a white frame and write diagram.png."""
    frame = render_frame(
        diagram,
        width=config.canvas.width,
        height=config.canvas.height,
        color=config.stroke.color.to_sv_color(),
        thickness=config.stroke.line_width,
    )
    return save_frame(frame, Path(output_folder) / "diagram.png")


def default_registry() -> RendererRegistry:
    registry = RendererRegistry()
    registry.register("console", render_console, "Print drawing commands to stdout")
    registry.register("svg", render_svg, "Write diagram.svg and diagram.html")
    registry.register("raster", render_raster, "Write diagram.png (stroked path)")
    return registry


@dataclass
class PipelineConfig:
    """
    Pipeline configuration.

    Design:
    - All dependencies injected
    - Validated at construction by the builder
    """

    config: DiagramConfig
    diagram: Diagram
    renderers: List[str]
    registry: RendererRegistry
    logger: StructuredLogger
    output_folder: Optional[Path] = None
    handler_kwargs: Dict[str, dict] = field(default_factory=dict)


class DiagramPipeline:
    """
    Runs a diagram through each selected renderer.

    Usage:
        pipeline = (
            PipelineBuilder()
            .with_config(DiagramConfig.from_yaml("config/diagram.yaml"))
            .add_renderer("console")
            .add_renderer("svg")
            .build()
        )

        outputs = pipeline.run()   # {"console": None, "svg": Path(...)}
    """

    def __init__(self, config: PipelineConfig):
        self.config = config

    @property
    def diagram(self) -> Diagram:
        return self.config.diagram

    def run(self) -> Dict[str, Optional[Path]]:
        """
        Render with every selected renderer, in selection order.

        Returns:
            Mapping renderer name -> written file (None for stdout targets)
        """
        cfg = self.config
        logger = cfg.logger
        outputs: Dict[str, Optional[Path]] = {}

        for name in cfg.renderers:
            logger.info(
                event=LogEvent.RENDER_STARTED,
                message=f"Rendering with '{name}'",
                metadata={'renderer': name, 'elements': len(cfg.diagram)},
            )
            try:
                output = cfg.registry.execute(
                    name,
                    cfg.diagram,
                    cfg.config,
                    cfg.output_folder,
                    **cfg.handler_kwargs.get(name, {}),
                )
            except Exception as e:
                logger.error(
                    event=LogEvent.RENDER_ERROR,
                    message=f"Renderer '{name}' failed",
                    metadata={'renderer': name},
                    exc_info=e,
                )
                raise

            outputs[name] = output
            logger.info(
                event=LogEvent.RENDER_COMPLETED,
                message=f"Rendered with '{name}'",
                metadata={'renderer': name},
            )
            if output is not None:
                logger.info(
                    event=LogEvent.RENDER_OUTPUT_WRITTEN,
                    message=f"Wrote {output}",
                    metadata={'renderer': name, 'path': str(output)},
                )

        return outputs


class PipelineBuilder:
    """
    Fluent builder for DiagramPipeline.

    Defaults:
    - config: DiagramConfig()
    - diagram: built from the config (showcase when no shapes declared)
    - renderers: ["console"]
    - output folder: config.output_dir, else ./runs/diagram/<timestamp>
      (only created when a file renderer is selected)
    """

    def __init__(self):
        self._config: Optional[DiagramConfig] = None
        self._diagram: Optional[Diagram] = None
        self._renderers: List[str] = []
        self._output_folder: Optional[Path] = None
        self._registry: Optional[RendererRegistry] = None
        self._logger: Optional[StructuredLogger] = None
        self._handler_kwargs: Dict[str, dict] = {}

    def with_config(self, config: DiagramConfig) -> "PipelineBuilder":
        self._config = config
        return self

    def with_diagram(self, diagram: Diagram) -> "PipelineBuilder":
        """Use this diagram instead of building one from the config."""
        self._diagram = diagram
        return self

    def with_output_folder(self, folder) -> "PipelineBuilder":
        self._output_folder = Path(folder)
        return self

    def with_registry(self, registry: RendererRegistry) -> "PipelineBuilder":
        self._registry = registry
        return self

    def with_logger(self, logger: StructuredLogger) -> "PipelineBuilder":
        self._logger = logger
        return self

    def add_renderer(self, name: str, **handler_kwargs) -> "PipelineBuilder":
        """
        Select a renderer by registry name.

        Args:
            name: Registered renderer name
            **handler_kwargs: Extra keyword arguments for its handler
                (e.g. write=... for console)
        """
        if name not in self._renderers:
            self._renderers.append(name)
        if handler_kwargs:
            self._handler_kwargs[name] = handler_kwargs
        return self

    def build(self) -> DiagramPipeline:
        """
        Build the pipeline.

        Raises:
            RendererNotAvailableError: If a selected renderer is unknown
        """
        config = self._config or DiagramConfig()
        registry = self._registry or default_registry()
        logger = self._logger or create_logger("pipeline")
        renderers = self._renderers or ["console"]

        for name in renderers:
            registry.get(name)

        diagram = self._diagram if self._diagram is not None else build_diagram(config)
        logger.info(
            event=LogEvent.DIAGRAM_BUILT,
            message="Diagram ready",
            metadata={'elements': len(diagram), 'declared_shapes': len(config.shapes)},
        )

        output_folder = self._output_folder or config.output_dir
        if output_folder is None and FILE_RENDERERS.intersection(renderers):
            output_folder = Path(get_target_run_folder(application_name="diagram"))

        return DiagramPipeline(PipelineConfig(
            config=config,
            diagram=diagram,
            renderers=renderers,
            registry=registry,
            logger=logger,
            output_folder=output_folder,
            handler_kwargs=dict(self._handler_kwargs),
        ))
