"""Interactive CLI application."""
import logging
import random
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from studyiq.dashboard import get_accuracy_color, get_accuracy_label, get_file_progress, get_study_stats
from studyiq.db import DEFAULT_DB_PATH, clear_all_data, init_db
from studyiq.entries import get_all_entries, get_entries_by_file
from studyiq.exceptions import StudyFileNotFoundError, StudyIQError
from studyiq.files import (
    delete_file_and_content, get_all_categories, get_all_files, get_file_by_id, get_files_by_category,
)
from studyiq.history import get_all_quiz_history
from studyiq.importer import import_file
from studyiq.log import setup_logging
from studyiq.models import DIFFICULTIES, MODES, MEANING_TO_TERM, QuizConfig, QuizResult
from studyiq.quiz import QuizRun, complete_quiz, retest_wrong_config, weak_focus_config
from studyiq.ranges import parse_range
from studyiq.review import count_mistakes_in_range, get_weak_entries
from studyiq.sequence import plan_continue_sequence, suggest_range
from studyiq.session import make_quiz_session
from studyiq.settings import QuizDefaults, load_quiz_defaults, save_quiz_defaults

console = Console()
logger = logging.getLogger(__name__)

EXIT_WORDS = ("q", "menu")


class SessionExitRequested(Exception):
    """Raised when the user types 'q' or 'menu' at a prompt inside a quiz."""


def session_prompt(prompt: str, **kwargs) -> str:
    value = Prompt.ask(prompt, **kwargs)
    if value is not None and value.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return value


def session_int_prompt(prompt: str, choices: list[str]) -> int:
    while True:
        value = session_prompt(prompt).strip()
        if value in choices:
            return int(value)
        console.print(f"[red]Pick one of {', '.join(choices)} (or 'q' to leave).[/red]")


def show_welcome():
    console.print(Panel(
        "[bold]StudyIQ[/bold]\n[dim]Term & meaning quiz trainer[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("quiz", "Start a quiz"),
        ("files", "List study files"),
        ("library", "Browse categories and terms"),
        ("import", "Add a term list"),
        ("delete", "Delete a study file"),
        ("dashboard", "Accuracy + progress"),
        ("review", "Most missed terms"),
        ("history", "Past quizzes"),
        ("settings", "Quiz defaults"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def format_time(seconds: int) -> str:
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def show_results(result: QuizResult) -> None:
    color = get_accuracy_color(result.accuracy)
    table = Table(title="Quiz Complete")
    table.add_column("Right", justify="right", style="green")
    table.add_column("Wrong", justify="right", style="red")
    table.add_column("Accuracy", justify="right")
    table.add_row(str(result.correct), str(result.wrong), f"[{color}]{result.accuracy}%[/{color}]")
    console.print(table)
    if result.wrong_entries:
        console.print("\n[bold]Weak Points:[/bold]")
        for entry in result.wrong_entries:
            console.print(f"  [red]{entry.term}[/red] — {entry.meaning}")


def run_quiz_session(db_path: str, config: QuizConfig, rng: random.Random | None = None) -> QuizResult | None:
    """Run one quiz interactively. Returns None when there was nothing to ask."""
    study_file = get_file_by_id(db_path, config.file)
    if study_file is None:
        raise StudyFileNotFoundError(config.file)
    entries = get_entries_by_file(db_path, config.file)
    session = make_quiz_session(
        entries,
        mode=config.mode,
        difficulty=config.difficulty,
        question_count=config.question_count,
        range_start=config.range_start,
        range_end=config.range_end,
        rng=rng,
    )
    if not session.questions:
        if config.mode == "mistakes":
            console.print("[green]Nothing to review in this range. No missed terms![/green]")
        else:
            console.print("[yellow]No questions available![/yellow]")
        return None

    run = QuizRun(db_path, config, session.questions, session.used_range, len(entries))
    total = len(session.questions)
    console.print(
        f"\n[bold]Quiz[/bold] — {total} questions from {study_file.name} "
        f"(entries {session.used_range.start}-{session.used_range.end})\n"
    )
    while not run.done:
        question = run.current_question
        hint = "Choose the correct term" if question.direction == MEANING_TO_TERM else "Choose the correct meaning"
        console.print(
            f"[bold]Q{run.current + 1}/{total}[/bold]  [dim]{format_time(run.time_left)} left[/dim]"
        )
        console.print(Panel(question.prompt, subtitle=hint, border_style="cyan"))
        for i, option in enumerate(question.options, 1):
            console.print(f"  [cyan]{i})[/cyan] {option.text}")
        choices = [str(i) for i in range(1, len(question.options) + 1)]
        picked = session_int_prompt("\nYour answer", choices=choices)
        if run.expired:
            console.print("[yellow]Time's up![/yellow]")
            break
        if run.answer(picked - 1):
            console.print("[green]Correct![/green]")
        else:
            console.print(f"[red]Incorrect.[/red] Answer: [green]{question.correct_option.text}[/green]")
        console.print()

    result = run.finish()
    complete_quiz(db_path, result)
    show_results(result)
    return result


def show_files(db_path: str) -> list:
    files = get_all_files(db_path)
    if not files:
        console.print("[yellow]No study files yet. Use 'import' to add one.[/yellow]")
        return files
    table = Table(title="Study Files")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Entries", justify="right")
    table.add_column("Next", justify="right")
    for f in files:
        table.add_row(str(f.id), f.name, f.category or "-", str(f.entry_count), str(f.sequence_pointer))
    console.print(table)
    return files


def prompt_quiz_config(db_path: str, defaults: QuizDefaults, prefill: QuizConfig | None = None) -> QuizConfig | None:
    files = show_files(db_path)
    if not files:
        return None
    file_ids = [str(f.id) for f in files]
    default_file = str(prefill.file) if prefill and str(prefill.file) in file_ids else file_ids[0]
    file_id = int(Prompt.ask("Select file", choices=file_ids, default=default_file))
    study_file = next(f for f in files if f.id == file_id)

    count = max(1, IntPrompt.ask("Number of questions", default=prefill.question_count if prefill else defaults.question_count))
    if prefill and prefill.file == file_id:
        suggested = (prefill.range_start, prefill.range_end)
    else:
        window = suggest_range(study_file, count)
        suggested = (window.start, window.end)
    range_text = Prompt.ask("Range", default=f"{suggested[0]}-{suggested[1]}")
    chosen = parse_range(range_text, 1, count)
    difficulty = Prompt.ask("Difficulty", choices=list(DIFFICULTIES), default=prefill.difficulty if prefill else defaults.difficulty)
    mode = Prompt.ask("Mode", choices=list(MODES), default=prefill.mode if prefill else defaults.mode)
    timer = IntPrompt.ask("Timer (minutes)", default=prefill.timer_minutes if prefill else defaults.timer_minutes)
    return QuizConfig(
        file=file_id,
        mode=mode,
        difficulty=difficulty,
        question_count=count,
        range_start=chosen.start,
        range_end=chosen.end,
        category=study_file.category,
        timer_minutes=max(1, timer),
    )


def follow_up(db_path: str, defaults: QuizDefaults, result: QuizResult) -> QuizConfig | None:
    """Ask what to do after a quiz and return the next config, or None for the menu."""
    options = ["continue", "weak", "new", "menu"]
    if result.wrong_entries:
        options.insert(0, "retest")
    choice = Prompt.ask("\nNext", choices=options, default="menu")
    if choice == "retest":
        return retest_wrong_config(result)
    if choice == "weak":
        config = weak_focus_config(result)
        missed = count_mistakes_in_range(db_path, config.file, config.range_start, config.range_end)
        console.print(f"[dim]{missed} missed terms in entries {config.range_start}-{config.range_end}[/dim]")
        return config
    if choice == "continue":
        config, exhausted = plan_continue_sequence(db_path, result)
        if exhausted:
            console.print("[yellow]You reached the end of this file.[/yellow]")
            if not Confirm.ask("Start again from the beginning?", default=True):
                return None
            return prompt_quiz_config(db_path, defaults, prefill=config)
        return config
    if choice == "new":
        return prompt_quiz_config(db_path, defaults)
    return None


def cmd_quiz(db_path: str, defaults: QuizDefaults):
    console.print("\n[bold]Start Quiz[/bold] [dim](type 'q' during a quiz to return to the menu)[/dim]")
    config = prompt_quiz_config(db_path, defaults)
    while config is not None:
        try:
            result = run_quiz_session(db_path, config)
        except SessionExitRequested:
            console.print("[dim]Quiz abandoned. Answers so far are saved.[/dim]")
            return
        if result is None:
            return
        config = follow_up(db_path, defaults, result)


def cmd_files(db_path: str):
    show_files(db_path)


def cmd_library(db_path: str) -> list:
    """Browse category, then file, then that file's entries. Returns the entries shown."""
    categories = get_all_categories(db_path)
    if not categories:
        console.print("[yellow]Your library is empty. Use 'import' to add a term list.[/yellow]")
        return []
    all_entries = get_all_entries(db_path)
    missed = sum(1 for e in all_entries if e.wrong_count > 0)
    console.print(
        f"\n[bold]Library[/bold] [dim]{len(categories)} categories, "
        f"{len(all_entries)} terms, {missed} missed[/dim]"
    )
    for i, name in enumerate(categories, 1):
        console.print(f"  [cyan]{i})[/cyan] {name}")
    picked = Prompt.ask("Category", choices=[str(i) for i in range(1, len(categories) + 1)])
    category = categories[int(picked) - 1]

    files = get_files_by_category(db_path, category)
    if not files:
        console.print(f"[yellow]No files in {category}.[/yellow]")
        return []
    table = Table(title=category)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name")
    table.add_column("Entries", justify="right")
    for f in files:
        table.add_row(str(f.id), f.name, str(f.entry_count))
    console.print(table)
    file_id = int(Prompt.ask("File", choices=[str(f.id) for f in files]))

    entries = get_entries_by_file(db_path, file_id)
    table = Table(title=next(f.name for f in files if f.id == file_id))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Term", style="cyan")
    table.add_column("Meaning")
    table.add_column("Wrong", justify="right", style="red")
    table.add_column("Attempts", justify="right")
    for position, entry in enumerate(entries, 1):
        table.add_row(
            str(position), entry.term, entry.meaning,
            str(entry.wrong_count or "-"), str(entry.attempt_count),
        )
    console.print(table)
    return entries


def cmd_import(db_path: str):
    file_path = Prompt.ask("File path")
    if not Path(file_path).exists():
        console.print(f"[red]File not found: {file_path}[/red]")
        return
    category = Prompt.ask("Category", default="General")
    study_file = import_file(db_path, file_path, category=category)
    console.print(f"[green]Imported {study_file.name} ({study_file.entry_count} entries) → {category}[/green]")


def cmd_delete(db_path: str):
    files = show_files(db_path)
    if not files:
        return
    file_id = int(Prompt.ask("Delete file", choices=[str(f.id) for f in files]))
    if Confirm.ask("Delete this file and all of its entries?", default=False):
        removed = delete_file_and_content(db_path, file_id)
        console.print(f"[green]Deleted file {file_id} ({removed} entries).[/green]")


def cmd_dashboard(db_path: str):
    stats = get_study_stats(db_path)
    color = get_accuracy_color(stats["accuracy"])
    label = get_accuracy_label(stats["accuracy"])
    console.print(Panel("[bold]Your progress[/bold]", title="StudyIQ Dashboard", border_style="blue"))

    bar_filled = int(stats["accuracy"] / 5)
    bar = f"[{color}]{'█' * bar_filled}{'░' * (20 - bar_filled)}[/{color}]"
    console.print(f"\n  Accuracy: [bold]{stats['accuracy']}%[/bold] {bar} [{color}]{label}[/{color}]\n")
    console.print(f"  Files: [bold]{stats['total_files']}[/bold]  |  "
                  f"Terms: [bold]{stats['total_entries']}[/bold]  |  "
                  f"Quizzes: [bold]{stats['total_attempts']}[/bold]  |  "
                  f"Weak words: [bold]{stats['weak_words']}[/bold]")

    progress = get_file_progress(db_path)
    if progress:
        table = Table(title="Files")
        table.add_column("File", style="cyan")
        table.add_column("Covered", justify="right")
        table.add_column("Attempted", justify="right")
        table.add_column("Missed", justify="right")
        for p in progress:
            table.add_row(p["name"], f"{p['coverage']}%", f"{p['attempted']}/{p['entry_count']}", str(p["missed"]))
        console.print(table)


def cmd_review(db_path: str):
    console.print("\n[bold]Most Missed Terms[/bold]\n")
    weak = get_weak_entries(db_path)
    if not weak:
        console.print("[green]No missed terms yet! Keep up the good work.[/green]")
        return
    table = Table()
    table.add_column("Term", style="cyan")
    table.add_column("Meaning")
    table.add_column("File")
    table.add_column("Wrong", justify="right", style="red")
    table.add_column("Error rate", justify="right")
    for w in weak:
        table.add_row(w["term"], w["meaning"], w["file_name"], str(w["wrong_count"]), f"{w['error_rate']}%")
    console.print(table)


def cmd_history(db_path: str):
    history = get_all_quiz_history(db_path)
    if not history:
        console.print("[yellow]No quizzes taken yet.[/yellow]")
        return
    table = Table(title="Quiz History")
    table.add_column("When")
    table.add_column("Mode")
    table.add_column("Range")
    table.add_column("Score", justify="right")
    table.add_column("Accuracy", justify="right")
    for h in history[-20:]:
        cfg = h["config"]
        color = get_accuracy_color(h["accuracy"])
        table.add_row(
            h["timestamp"][:16].replace("T", " "),
            cfg.get("mode", "-"),
            f"{cfg.get('range_start', '?')}-{cfg.get('range_end', '?')}",
            f"{h['correct']}/{h['total']}",
            f"[{color}]{h['accuracy']}%[/{color}]",
        )
    console.print(table)


def cmd_settings(db_path: str) -> QuizDefaults:
    current = load_quiz_defaults(db_path)
    action = Prompt.ask("Settings", choices=["defaults", "clear", "back"], default="defaults")
    if action == "clear":
        console.print("[bold red]This permanently deletes all files, entries and quiz history.[/bold red]")
        if Confirm.ask("Clear all data? This cannot be undone.", default=False):
            clear_all_data(db_path)
            console.print("[green]All study data cleared.[/green]")
        return current
    if action == "back":
        return current

    count = IntPrompt.ask("Default number of questions", default=current.question_count)
    difficulty = Prompt.ask("Default difficulty", choices=list(DIFFICULTIES), default=current.difficulty)
    mode = Prompt.ask("Default mode", choices=list(MODES), default=current.mode)
    timer = IntPrompt.ask("Default timer (minutes)", default=current.timer_minutes)
    defaults = QuizDefaults(
        question_count=max(1, count), difficulty=difficulty, mode=mode, timer_minutes=max(1, timer),
    )
    save_quiz_defaults(db_path, defaults)
    console.print("[green]Settings saved.[/green]")
    return defaults


def main():
    setup_logging(console=console)
    db_path = DEFAULT_DB_PATH
    init_db(db_path)
    defaults = load_quiz_defaults(db_path)

    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="quiz").strip().lower()
        try:
            if choice == "quiz":
                cmd_quiz(db_path, defaults)
            elif choice == "files":
                cmd_files(db_path)
            elif choice == "library":
                cmd_library(db_path)
            elif choice == "import":
                cmd_import(db_path)
            elif choice == "delete":
                cmd_delete(db_path)
            elif choice == "dashboard":
                cmd_dashboard(db_path)
            elif choice == "review":
                cmd_review(db_path)
            elif choice == "history":
                cmd_history(db_path)
            elif choice == "settings":
                defaults = cmd_settings(db_path)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Happy studying![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except StudyIQError as e:
            console.print(f"[red]{e}[/red]")
        except Exception as e:
            logger.debug("Command %s failed", choice, exc_info=True)
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
