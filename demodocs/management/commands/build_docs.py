"""
Management command to compile markdown documentation into Vue components.

Every *.md file under the source directory is compiled to a .vue file at the
same relative path under the output directory. Demo containers become
<demo-block> widgets; see demodocs.markdown.extensions.demo_block.
"""

from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from demodocs.build import build_document, output_path_for
from demodocs.exceptions import DocumentBuildError


class Command(BaseCommand):
    help = 'Compile markdown documentation pages into Vue components'

    def add_arguments(self, parser):
        parser.add_argument(
            'source',
            nargs='?',
            help='Directory of markdown pages (default: DEMO_DOCS["SOURCE_DIR"])',
        )
        parser.add_argument(
            '--output',
            type=str,
            help='Directory for compiled .vue files (default: DEMO_DOCS["OUTPUT_DIR"])',
        )
        parser.add_argument(
            '--toc',
            action='store_true',
            help='Also write a <page>.toc.json heading outline per page',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Compile pages without writing any files',
        )
        parser.add_argument(
            '--async',
            action='store_true',
            dest='use_async',
            help='Queue one Celery task per page instead of building inline',
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Show per-page progress',
        )

    def handle(self, *args, **options):
        doc_settings = getattr(settings, 'DEMO_DOCS', {})
        source = options.get('source') or doc_settings.get('SOURCE_DIR')
        output = options.get('output') or doc_settings.get('OUTPUT_DIR')
        toc = options.get('toc')
        dry_run = options.get('dry_run')
        use_async = options.get('use_async')
        verbose = options.get('verbose')

        if not source:
            raise CommandError('No source directory given and DEMO_DOCS["SOURCE_DIR"] is not set')
        if not output:
            raise CommandError('No output directory given and DEMO_DOCS["OUTPUT_DIR"] is not set')

        source_root = Path(source)
        output_root = Path(output)
        if not source_root.is_dir():
            raise CommandError(f'Source directory does not exist: {source_root}')

        if dry_run:
            self.stdout.write(
                self.style.WARNING('DRY RUN MODE: No files will be written\n')
            )

        pages = sorted(source_root.rglob('*.md'))
        total = len(pages)
        self.stdout.write(f'Found {total} page(s) in {source_root}\n')

        stats = {
            'pages_built': 0,
            'pages_queued': 0,
            'demos': 0,
            'failed': [],
        }

        for i, page in enumerate(pages, 1):
            target = output_path_for(page, source_root, output_root)

            if use_async and not dry_run:
                from demodocs.tasks import build_document_task

                build_document_task.delay(str(page), str(target), toc=toc)
                stats['pages_queued'] += 1
                if verbose:
                    self.stdout.write(f'[{i}/{total}] Queued: {page}')
                continue

            try:
                result = build_document(page, target, toc=toc, dry_run=dry_run)
            except DocumentBuildError as e:
                stats['failed'].append(str(page))
                self.stdout.write(self.style.ERROR(f'  Error building {page}: {e}'))
                continue

            stats['pages_built'] += 1
            stats['demos'] += result['demos']
            if verbose:
                self.stdout.write(
                    f"[{i}/{total}] {page} -> {target} ({result['demos']} demos)"
                )

        # Print summary
        self.stdout.write('\n' + '=' * 60)
        self.stdout.write('SUMMARY')
        self.stdout.write('=' * 60)
        self.stdout.write(f"Pages built:   {stats['pages_built']}")
        if stats['pages_queued']:
            self.stdout.write(f"Pages queued:  {stats['pages_queued']}")
        self.stdout.write(f"Demo blocks:   {stats['demos']}")
        self.stdout.write('=' * 60)

        if stats['failed']:
            raise CommandError(
                f"{len(stats['failed'])} page(s) failed: {', '.join(stats['failed'])}"
            )

        if dry_run:
            self.stdout.write(
                self.style.WARNING('\nDRY RUN COMPLETE: No files were written')
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(f'\nBUILD COMPLETE: {output_root}')
            )
