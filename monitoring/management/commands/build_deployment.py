import os
import shutil
import zipfile
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

INCLUDE_FILES = [
    'core',
    'monitoring',
    'crimemap',
    'manage.py',
    'pyproject.toml',
]

# Penanda bahwa folder dibuat oleh command ini (boleh dihapus saat build ulang)
BUILD_MARKER = '.crimemap-build'

IGNORE_PATTERNS = shutil.ignore_patterns('__pycache__', '*.pyc', '.env', 'db.sqlite3', 'tests')

ENV_TEMPLATE = """DJANGO_SECRET_KEY=GENERATE_NEW_KEY_HERE
DJANGO_DEBUG=false
DJANGO_ALLOWED_HOSTS=yourdomain.com
DJANGO_LOG_LEVEL=WARNING

DATABASE_ENGINE=django.db.backends.mysql
DATABASE_NAME=your_database_name
DATABASE_USER=your_database_user
DATABASE_PASSWORD=your_database_password
DATABASE_HOST=localhost
DATABASE_PORT=3306

TIME_ZONE=Asia/Jakarta
CRIMEMAP_RECENT_ACTIVITY_LIMIT=5
"""

INSTRUCTIONS = """CRIME MAP - PANDUAN DEPLOYMENT
==============================

1. Upload isi folder 'app' ke server (di luar folder publik).
2. Upload isi folder 'public_html/static' ke folder static publik.
3. Salin app/.env.production menjadi app/.env lalu sesuaikan isinya.
4. Install dependensi:  pip install .
5. Jalankan migrasi:    python manage.py migrate
6. Jalankan aplikasi lewat WSGI: crimemap.wsgi:application
"""


class Command(BaseCommand):
    help = 'Build deployment package (folder + zip) for Crime Map'

    def add_arguments(self, parser):
        parser.add_argument(
            '--output-dir',
            type=str,
            default=None,
            help='Folder tujuan build (default: <BASE_DIR>/build-deployment)'
        )
        parser.add_argument(
            '--zip-name',
            type=str,
            default='crime-map-deployment.zip',
            help='Nama file zip hasil build'
        )
        parser.add_argument(
            '--keep-build',
            action='store_true',
            help='Jangan hapus folder build setelah zip dibuat'
        )

    def handle(self, *args, **kwargs):
        project_root = Path(settings.BASE_DIR)
        build_dir = Path(kwargs['output_dir']) if kwargs['output_dir'] else project_root / 'build-deployment'
        zip_path = build_dir.parent / kwargs['zip_name']

        resolved_build = build_dir.resolve()
        resolved_root = project_root.resolve()
        if resolved_build == resolved_root or resolved_build in resolved_root.parents:
            raise CommandError('Output dir tidak boleh root project atau folder induknya')

        if build_dir.exists():
            if not build_dir.is_dir():
                raise CommandError(f'Output dir {build_dir} bukan folder')
            if any(build_dir.iterdir()) and not (build_dir / BUILD_MARKER).exists():
                raise CommandError(
                    f'Output dir {build_dir} sudah berisi file dan bukan hasil build_deployment'
                )

        self.stdout.write('Building deployment package for Crime Map...\n')

        # --- BERSIHKAN BUILD LAMA ---
        if build_dir.exists():
            self.stdout.write('Cleaning previous build...')
            shutil.rmtree(build_dir)
        if zip_path.exists():
            zip_path.unlink()

        app_dir = build_dir / 'app'
        public_dir = build_dir / 'public_html'
        app_dir.mkdir(parents=True)
        public_dir.mkdir(parents=True)
        (build_dir / BUILD_MARKER).touch()

        # --- 1. FILE APLIKASI ---
        self.stdout.write('Copying application files...')
        for name in INCLUDE_FILES:
            src = project_root / name
            dest = app_dir / name
            if not src.exists():
                self.stdout.write(self.style.WARNING(f'   {name} not found, skipping...'))
                continue
            try:
                if src.is_dir():
                    shutil.copytree(src, dest, ignore=IGNORE_PATTERNS)
                else:
                    shutil.copy2(src, dest)
            except OSError as e:
                raise CommandError(f'Failed to copy {name}: {e}')
            self.stdout.write(self.style.SUCCESS(f'   [OK] {name}'))

        # --- 2. FILE STATIS ---
        self.stdout.write('\nCopying static files...')
        static_root = Path(settings.STATIC_ROOT)
        if static_root.exists():
            shutil.copytree(static_root, public_dir / 'static')
            self.stdout.write(self.style.SUCCESS(f'   [OK] {static_root.name}'))
        else:
            self.stdout.write(self.style.WARNING(
                '   STATIC_ROOT not found, run "manage.py collectstatic" first. Skipping...'
            ))

        # --- 3. ENV PRODUKSI ---
        self.stdout.write('\nSetting up .env.production...')
        source_env = project_root / '.env.production'
        target_env = app_dir / '.env.production'
        if source_env.exists():
            shutil.copy2(source_env, target_env)
            self.stdout.write(self.style.SUCCESS('   [OK] Copied existing .env.production'))
        else:
            target_env.write_text(ENV_TEMPLATE, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS('   [OK] Created .env.production template'))

        (build_dir / 'DEPLOYMENT.txt').write_text(INSTRUCTIONS, encoding='utf-8')

        # --- 4. ZIP ---
        self.stdout.write('\nCreating zip archive...')
        with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zf:
            for root, _dirs, files in os.walk(build_dir):
                for filename in files:
                    if filename == BUILD_MARKER:
                        continue
                    full_path = Path(root) / filename
                    zf.write(full_path, full_path.relative_to(build_dir))

        size_mb = zip_path.stat().st_size / (1024 * 1024)

        if not kwargs['keep_build']:
            shutil.rmtree(build_dir)

        self.stdout.write('\n' + '='*40)
        self.stdout.write(self.style.SUCCESS(f'DONE. {zip_path} ({size_mb:.2f} MB)'))
