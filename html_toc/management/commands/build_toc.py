"""
Management command to build a table of contents for an HTML fragment.

Reads rendered HTML from a file (or stdin when the path is "-") and writes the
TOC followed by the fragment with heading permalinks injected.
"""

import logging
import sys
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from html_toc.parser import Parser

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Build a table of contents and heading anchors for an HTML fragment'

    def add_arguments(self, parser):
        parser.add_argument(
            'input',
            type=str,
            help='Path to the HTML fragment, or "-" to read from stdin',
        )
        mode = parser.add_mutually_exclusive_group()
        mode.add_argument(
            '--toc-only',
            action='store_true',
            help='Only output the table of contents',
        )
        mode.add_argument(
            '--anchors-only',
            action='store_true',
            help='Only output the HTML with anchors injected',
        )
        parser.add_argument(
            '--levels',
            type=int,
            nargs='+',
            help='Heading levels to include (default: HTML_TOC setting or 1-6)',
        )
        parser.add_argument(
            '--no-toc-class',
            type=str,
            help='Class that excludes a single heading',
        )
        parser.add_argument(
            '--no-toc-section-class',
            type=str,
            nargs='+',
            help='Class(es) that exclude every heading inside the element',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='Write the result to this file instead of stdout',
        )

    def handle(self, *args, **options):
        html = self.read_input(options['input'])

        toc_options = {}
        if options.get('levels'):
            toc_options['toc_levels'] = options['levels']
        if options.get('no_toc_class'):
            toc_options['no_toc_class'] = options['no_toc_class']
        if options.get('no_toc_section_class'):
            toc_options['no_toc_section_class'] = options['no_toc_section_class']

        try:
            toc_parser = Parser(html, toc_options)
        except ImproperlyConfigured as exc:
            raise CommandError(str(exc))

        if options.get('toc_only'):
            result = toc_parser.build_toc()
        elif options.get('anchors_only'):
            result = toc_parser.inject_anchors()
        else:
            result = toc_parser.toc()

        output = options.get('output')
        if output:
            Path(output).write_text(result, encoding='utf-8')
            logger.info("Wrote TOC for %d headings to %s", len(toc_parser.entries), output)
            self.stdout.write(
                self.style.SUCCESS(f'{len(toc_parser.entries)} headings written to {output}')
            )
        else:
            self.stdout.write(result)

    def read_input(self, path):
        if path == '-':
            return sys.stdin.read()

        source = Path(path)
        if not source.is_file():
            raise CommandError(f'Input file not found: {path}')
        return source.read_text(encoding='utf-8')
