"""Terminal rendering of recipe analyses."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import PostAnalysis, ScoreBreakdown

PREVIEW_CHARS = 80


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    text = text.replace("\n", " ")
    return text if len(text) <= limit else text[: limit - 3] + "..."


class RecipeUI:
    """Rich tables for scores and post analyses."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def show_breakdown(self, breakdown: ScoreBreakdown) -> None:
        """Show every signal's hits and points."""
        table = Table(show_header=True, header_style="bold cyan", box=box.SIMPLE)
        table.add_column("Signal", style="dim blue")
        table.add_column("Hits", justify="right")
        table.add_column("Points", justify="right", style="bold")

        for contribution in breakdown.contributions:
            style = "green" if contribution.points > 0 else "red" if contribution.points < 0 else "dim"
            table.add_row(
                contribution.name,
                f"{contribution.hits:g}",
                f"[{style}]{contribution.points:+g}[/{style}]",
            )

        self.console.print(table)
        self.console.print(f"[bold]Total:[/bold] {breakdown.total}")

    def show_analyses(self, analyses: list[PostAnalysis]) -> None:
        """Show one panel per analysed post."""
        for index, analysis in enumerate(analyses, start=1):
            content = analysis.content

            summary = Table(show_header=False, box=box.SIMPLE, padding=(0, 2))
            summary.add_column("Field", style="dim blue")
            summary.add_column("Value", style="bold bright_blue")

            summary.add_row("🍽️  Title", Text(content.title or "-"))
            summary.add_row("⭐ Score", str(content.score))
            summary.add_row("📝 Main text", Text(_preview(content.main_text) or "-"))
            summary.add_row("💬 Comments", str(len(content.comments)))

            for rank, comment in enumerate(analysis.recipe_comments, start=1):
                summary.add_row(f"   #{rank}", Text(_preview(comment)))

            status = (
                "[bold green]Recipe detected[/bold green]"
                if analysis.recipe_detected
                else "[dim]No recipe detected[/dim]"
            )
            self.console.print(
                Panel(
                    summary,
                    title=f"Post {index}: {status}",
                    title_align="left",
                    box=box.ROUNDED,
                    border_style="bright_blue",
                )
            )
