#!/usr/bin/env python3
"""Command-line interface for the Mirror Mode voice engine."""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def _load_app_config(config_path):
    """Load config.json if present, otherwise fall back to defaults."""
    from mirror.config import Config, load_config

    try:
        return load_config(config_path)
    except FileNotFoundError:
        return Config()
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _read_input(path_arg):
    input_path = Path(path_arg)
    if not input_path.exists():
        print(f"Error: File not found: {path_arg}")
        sys.exit(1)
    return input_path.read_text()


def _create_learner(app_config):
    from mirror.voice.learning import VoiceLearner
    from mirror.voice.repository import JsonFileProfileRepository

    repository = JsonFileProfileRepository(app_config.storage.profile_dir)
    return VoiceLearner(repository, app_config.learning)


def cmd_analyze(args):
    """Extract and print the voice fingerprint of a text file."""
    from mirror.voice import build_voice_summary, describe_voice, extract_fingerprint

    text = _read_input(args.input)
    fingerprint = extract_fingerprint(text)

    if args.json:
        print(json.dumps(fingerprint.to_dict(), indent=2))
        return

    rhythm = fingerprint.rhythm
    print(f"Analysis of: {args.input}")
    print(f"\nStructure:")
    print(f"  Words: {fingerprint.meta.sample_word_count}")
    print(f"  Sentences: {fingerprint.meta.sample_sentence_count}")
    print(f"\nSentence Length:")
    print(f"  Mean: {rhythm.avg_sentence_length:.1f} words")
    print(f"  Std: {rhythm.sentence_variation:.1f}")
    print(f"  Short: {rhythm.short_sentence_ratio:.0%}  Long: {rhythm.long_sentence_ratio:.0%}")
    print(f"\nVoice:")
    print(f"  Formality: {fingerprint.voice.formality_score:.2f}")
    print(f"  Active voice: {fingerprint.voice.active_voice_ratio:.0%}")
    if fingerprint.vocabulary.top_words:
        print(f"  Top words: {', '.join(fingerprint.vocabulary.top_words[:10])}")
    print(f"\n{describe_voice(fingerprint)}")
    print(f"Summary: {build_voice_summary(fingerprint)}")


def cmd_learn(args):
    """Learn a text file into a user's voice profile."""
    learner = _create_learner(args.app_config)
    text = _read_input(args.input)

    result = learner.learn(
        args.user,
        text,
        source=args.source,
        title=args.title or Path(args.input).name,
        writing_type=args.type,
    )

    if not result.learned:
        print(f"Not learned: {result.error}")
        sys.exit(1)

    if result.is_first_document:
        print(f"Created voice profile for {args.user}")
    print(f"Confidence: {result.confidence_level}% ({result.confidence_label}, +{result.confidence_gain})")
    for change in result.changes_made:
        print(f"  - {change}")


def cmd_status(args):
    """Show a user's voice profile status."""
    learner = _create_learner(args.app_config)
    status = learner.status(args.user, recent=args.history)

    print(f"Voice profile: {args.user}")
    print(f"  Status: {status.confidence_label} ({status.confidence_level}%)")

    if status.has_profile:
        print(f"  Documents: {status.document_count}")
        print(f"  Words: {status.total_word_count}")
        print(f"  Last trained: {status.last_trained_at}")
        milestone = status.next_milestone
        if status.confidence_level < milestone.target:
            print(f"  Next milestone: {milestone.label} at {milestone.target}%")
        print(f"\n{status.voice_description}")
        for highlight in status.highlights:
            print(f"  {highlight['label']}: {highlight['value']}")

        if status.evolution_history:
            print("\nRecent history:")
            for entry in status.evolution_history:
                print(
                    f"  {entry.timestamp}  {entry.document_name} "
                    f"({entry.confidence_level}%, +{entry.confidence_delta}): "
                    f"{', '.join(entry.changes_made)}"
                )

    if status.recommendations:
        print("\nRecommendations:")
        for tip in status.recommendations:
            print(f"  - {tip}")


def cmd_reset(args):
    """Delete a user's voice profile."""
    learner = _create_learner(args.app_config)

    if learner.reset(args.user):
        print(f"Voice profile for {args.user} reset.")
    else:
        print(f"No voice profile found for {args.user}.")


def main():
    from mirror.utils.logging import setup_logging

    parser = argparse.ArgumentParser(
        description="Mirror Mode - Learn a writer's voice from their documents"
    )
    parser.add_argument(
        "--config",
        default="config.json",
        help="Configuration file (default: config.json, falls back to defaults)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Extract the voice fingerprint of a text file"
    )
    analyze_parser.add_argument(
        "input",
        help="Text file to analyze"
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw fingerprint as JSON"
    )
    analyze_parser.set_defaults(func=cmd_analyze)

    # Learn command
    learn_parser = subparsers.add_parser(
        "learn",
        help="Learn a text file into a user's voice profile"
    )
    learn_parser.add_argument(
        "input",
        help="Text file to learn from"
    )
    learn_parser.add_argument(
        "--user", "-u",
        required=True,
        help="Profile owner"
    )
    learn_parser.add_argument(
        "--source",
        default="manual-upload",
        help="Text source, sets the minimum word count (default: manual-upload)"
    )
    learn_parser.add_argument(
        "--type",
        help="Writing type: professional, academic, creative, personal or technical"
    )
    learn_parser.add_argument(
        "--title",
        help="Document name for the history log (default: file name)"
    )
    learn_parser.set_defaults(func=cmd_learn)

    # Status command
    status_parser = subparsers.add_parser(
        "status",
        help="Show a user's voice profile"
    )
    status_parser.add_argument(
        "--user", "-u",
        required=True,
        help="Profile owner"
    )
    status_parser.add_argument(
        "--history",
        type=int,
        default=5,
        help="Number of recent history entries to show (default: 5)"
    )
    status_parser.set_defaults(func=cmd_status)

    # Reset command
    reset_parser = subparsers.add_parser(
        "reset",
        help="Delete a user's voice profile"
    )
    reset_parser.add_argument(
        "--user", "-u",
        required=True,
        help="Profile owner"
    )
    reset_parser.set_defaults(func=cmd_reset)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.app_config = _load_app_config(args.config)
    setup_logging(args.app_config.log_level, args.app_config.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
