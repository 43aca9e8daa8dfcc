#!/usr/bin/env python3
"""
Chunked Audio/Video Transcription Pipeline

A command-line pipeline that:
1. Extracts the audio track from video files
2. Splits large files into chunks
3. Transcribes the chunks one at a time with Gemini or Speech-to-Text
4. Optionally generates a meeting summary from the transcript
"""

import argparse
import json
import logging
import signal
import sys

from .ai import SummaryGenerator, create_summary_client
from .core import TranscriptionPipeline, LoggingObserver
from .exceptions import OperationCancelled, TranscriptionError
from .models import BackendType, PipelineConfig, RunStatus, SourceFile
from .utils import load_config, merge_configs, run_environment_checks, write_text_file

logger = logging.getLogger(__name__)

EXIT_ABORTED = 130

# Tail of the running transcript shown after each chunk
PARTIAL_PREVIEW_CHARS = 200


class ConsoleObserver(LoggingObserver):
    """Prints pipeline progress to the terminal."""

    def __init__(self):
        self._last_progress_decile = -1

    def on_stage(self, status, message=""):
        super().on_stage(status, message)
        if message:
            print(message)

    def on_extraction_progress(self, pct):
        decile = int(pct // 10)
        if decile > self._last_progress_decile:
            self._last_progress_decile = decile
            print(f"  Extracting audio: {pct:.0f}%")

    def on_extraction_fallback(self, error):
        super().on_extraction_fallback(error)
        print(f"⚠️  Audio extraction failed ({error}), transcribing the original file instead")

    def on_chunk_started(self, chunk):
        super().on_chunk_started(chunk)
        print(f"Processing chunk {chunk.part_number} of {chunk.total}...")

    def on_chunk_failed(self, chunk, error):
        super().on_chunk_failed(chunk, error)
        print(f"✗ Error with chunk {chunk.part_number}: {error}")

    def on_partial_transcript(self, transcript):
        super().on_partial_transcript(transcript)
        preview = transcript
        if len(transcript) > PARTIAL_PREVIEW_CHARS:
            preview = "..." + transcript[-PARTIAL_PREVIEW_CHARS:]
        print(f"  Transcript so far: {preview}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Chunked Audio/Video Transcription Pipeline')
    parser.add_argument('input', nargs='?',
                        help='Audio or video file path')
    parser.add_argument('--check-env', action='store_true',
                        help='Check FFmpeg and credentials, then exit')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON configuration file')
    parser.add_argument('--backend', choices=[b.value for b in BackendType], default=None,
                        help='Transcription backend (default: speechRecognition)')
    parser.add_argument('--gemini-model', type=str, default=None,
                        help='Gemini model for transcription and summaries (default: gemini-2.5-flash)')
    parser.add_argument('--chunk-size-mb', type=float, default=None,
                        help='Maximum size of each chunk in MB (default: 15)')
    parser.add_argument('--delay', type=float, default=None,
                        help='Seconds to wait between chunks (default: 1.0)')
    parser.add_argument('--no-extract-audio', action='store_true',
                        help='Send video files to the backend without extracting audio first')
    parser.add_argument('--language', type=str, default=None,
                        help='Language code (default: en-US)')
    parser.add_argument('--model', type=str, default=None,
                        help='Speech-to-Text recognition model (default: default)')
    parser.add_argument('--no-punctuation', action='store_true',
                        help='Disable automatic punctuation')
    parser.add_argument('--diarize', action='store_true',
                        help='Label speakers (Speech-to-Text only)')
    parser.add_argument('--speakers', type=int, default=None,
                        help='Number of speakers when diarizing (default: 2)')
    parser.add_argument('--sample-rate', type=int, default=None,
                        help='Audio sample rate in Hz (default: 16000)')
    parser.add_argument('--summary', action='store_true',
                        help='Generate a meeting summary after transcription')
    parser.add_argument('--output', type=str, default=None,
                        help='Write the transcript to this file')
    parser.add_argument('--summary-output', type=str, default=None,
                        help='Write the summary to this file')
    parser.add_argument('--json', action='store_true',
                        help='Print the run as JSON instead of plain text')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')
    return parser


def build_config(args: argparse.Namespace) -> PipelineConfig:
    """Combine config file, environment and command-line flags."""
    base_config = PipelineConfig.from_env()
    if args.config:
        file_config = load_config(args.config)
        if file_config is None:
            raise TranscriptionError(f"Could not load configuration from {args.config}")
        base_config = file_config

    settings_overrides = {
        'language_code': args.language,
        'model': args.model,
        'enable_automatic_punctuation': False if args.no_punctuation else None,
        'enable_speaker_diarization': True if args.diarize else None,
        'speaker_count': args.speakers,
        'sample_rate_hertz': args.sample_rate,
    }
    return merge_configs(base_config, {
        'backend': args.backend,
        'gemini_model': args.gemini_model,
        'max_chunk_size_mb': args.chunk_size_mb,
        'chunk_delay_seconds': args.delay,
        'extract_audio': False if args.no_extract_audio else None,
        'settings': settings_overrides,
    })


def check_environment() -> int:
    print("=" * 60)
    print("ENVIRONMENT CHECK")
    print("=" * 60)
    all_passed = True
    for check_name, (passed, message) in run_environment_checks().items():
        print(f"{'✓' if passed else '✗'} {check_name}: {message}")
        all_passed = all_passed and passed
    return 0 if all_passed else 1


def main(argv=None) -> int:
    """Main function to run the transcription pipeline."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.check_env:
        return check_environment()

    if not args.input:
        parser.error("an input file is required")

    try:
        config = build_config(args)
        if config.settings.enable_speaker_diarization and config.backend == BackendType.GENERATIVE:
            logger.warning("Speaker labels are only produced by the speechRecognition backend")

        print(f"Configuration: {config}")
        pipeline = TranscriptionPipeline(config, observer=ConsoleObserver())

        def handle_interrupt(signum, frame):
            print("\nCancelling after the current chunk... (press Ctrl-C again to force quit)")
            signal.signal(signal.SIGINT, signal.default_int_handler)
            pipeline.cancel()

        signal.signal(signal.SIGINT, handle_interrupt)

        run = pipeline.process_file(SourceFile.from_path(args.input))
        if run.status == RunStatus.ABORTED:
            print("Transcription cancelled")
            return EXIT_ABORTED

        if args.output:
            path = write_text_file(args.output, run.transcript)
            print(f"Transcript saved to: {path}")
        if not args.json:
            print("\n=== Transcript ===")
            print(run.transcript)
        if run.failed_chunks:
            print(f"\n⚠️  {len(run.failed_chunks)} of {run.total_chunks} chunks failed")

    except (TranscriptionError, OSError, ValueError) as e:
        logger.error("%s", e)
        print(f"Error: {str(e)}")
        return 1

    exit_code = 0
    summary = None
    if args.summary:
        try:
            summary = generate_summary(config, pipeline, run.transcript)
        except OperationCancelled:
            print("Summary cancelled")
            exit_code = EXIT_ABORTED
        except Exception as e:
            logger.error("Summary failed: %s", e)
            print(f"Error: {str(e)}")
            exit_code = 1

    if summary is not None:
        if args.summary_output:
            try:
                path = write_text_file(args.summary_output, summary)
                print(f"Summary saved to: {path}")
            except OSError as e:
                logger.error("%s", e)
                print(f"Error: {str(e)}")
                exit_code = 1
        if not args.json:
            print("\n=== Summary ===")
            print(summary)

    if args.json:
        output = run.to_dict()
        output['summary'] = summary
        print(json.dumps(output, indent=2, ensure_ascii=False))

    return exit_code


def generate_summary(config: PipelineConfig, pipeline: TranscriptionPipeline, transcript: str) -> str:
    """Summarize a finished transcript; Ctrl-C cancels the request."""
    print("\nGenerating summary...")
    summary_generator = SummaryGenerator(
        create_summary_client(config, pipeline.backend),
        temperature=config.summary_temperature
    )

    def handle_summary_interrupt(signum, frame):
        signal.signal(signal.SIGINT, signal.default_int_handler)
        summary_generator.cancel()

    signal.signal(signal.SIGINT, handle_summary_interrupt)
    return summary_generator.summarize(transcript)


if __name__ == "__main__":
    sys.exit(main())
