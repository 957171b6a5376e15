"""create posyandu tables

Revision ID: 3f9a1c2d7b10
Revises:
Create Date: 2025-11-03 09:12:44.518230
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def kader_fk(column: str, table: str) -> sa.ForeignKeyConstraint:
    return sa.ForeignKeyConstraint([column], ['kader.id'], name=f'{table}_{column}_fkey', ondelete='RESTRICT')


def upgrade() -> None:
    op.create_table(
        'kader',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nama_lengkap', sa.String(length=100), nullable=False),
        sa.Column('nik', sa.String(length=16), nullable=True),
        sa.Column('no_telepon', sa.String(length=20), nullable=True),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id', name='kader_pkey'),
        sa.UniqueConstraint('nik', name='kader_nik_key'),
        sa.UniqueConstraint('username', name='kader_username_key'),
    )

    op.create_table(
        'ibu',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nama_lengkap', sa.String(length=100), nullable=False),
        sa.Column('nik', sa.String(length=16), nullable=False),
        sa.Column('no_telepon', sa.String(length=20), nullable=True),
        sa.Column('alamat', sa.Text(), nullable=True),
        sa.Column('id_kader_pendaftar', sa.Integer(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id', name='ibu_pkey'),
        sa.UniqueConstraint('nik', name='ibu_nik_key'),
        kader_fk('id_kader_pendaftar', 'ibu'),
    )

    # --- enum jenis kelamin ---
    jenis_kelamin_enum = sa.Enum('L', 'P', name='jeniskelamin')

    op.create_table(
        'anak',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('id_ibu', sa.Integer(), nullable=False),
        sa.Column('nama_anak', sa.String(length=100), nullable=False),
        sa.Column('nik_anak', sa.String(length=16), nullable=True),
        sa.Column('tanggal_lahir', sa.Date(), nullable=False),
        sa.Column('jenis_kelamin', jenis_kelamin_enum, nullable=False),
        sa.Column('anak_ke', sa.Integer(), nullable=True),
        sa.Column('berat_lahir_kg', sa.Float(), nullable=True),
        sa.Column('tinggi_lahir_cm', sa.Float(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id', name='anak_pkey'),
        sa.UniqueConstraint('nik_anak', name='anak_nik_anak_key'),
        sa.ForeignKeyConstraint(['id_ibu'], ['ibu.id'], name='anak_id_ibu_fkey', ondelete='RESTRICT'),
    )

    op.create_table(
        'perkembangan',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('id_anak', sa.Integer(), nullable=False),
        sa.Column('tanggal_pemeriksaan', sa.Date(), nullable=False),
        sa.Column('bb_kg', sa.Float(), nullable=True),
        sa.Column('tb_cm', sa.Float(), nullable=True),
        sa.Column('lk_cm', sa.Float(), nullable=True),
        sa.Column('ll_cm', sa.Float(), nullable=True),
        sa.Column('status_gizi', sa.String(length=50), nullable=True),
        sa.Column('saran', sa.Text(), nullable=True),
        sa.Column('id_kader_pencatat', sa.Integer(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id', name='perkembangan_pkey'),
        sa.ForeignKeyConstraint(['id_anak'], ['anak.id'], name='perkembangan_id_anak_fkey', ondelete='RESTRICT'),
        kader_fk('id_kader_pencatat', 'perkembangan'),
    )

    op.create_table(
        'master_imunisasi',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nama_imunisasi', sa.String(length=100), nullable=False),
        sa.Column('usia_ideal_bulan', sa.Integer(), server_default='0', nullable=False),
        sa.Column('deskripsi', sa.Text(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id', name='master_imunisasi_pkey'),
        sa.UniqueConstraint('nama_imunisasi', name='master_imunisasi_nama_imunisasi_key'),
        sa.CheckConstraint('usia_ideal_bulan >= 0', name='master_imunisasi_usia_ideal_bulan_check'),
    )

    op.create_table(
        'riwayat_imunisasi',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('id_anak', sa.Integer(), nullable=False),
        sa.Column('id_master_imunisasi', sa.Integer(), nullable=False),
        sa.Column('tanggal_imunisasi', sa.Date(), nullable=False),
        sa.Column('catatan', sa.Text(), nullable=True),
        sa.Column('id_kader_pencatat', sa.Integer(), nullable=False),
        sa.Column('id_kader_updater', sa.Integer(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id', name='riwayat_imunisasi_pkey'),
        sa.ForeignKeyConstraint(
            ['id_anak'], ['anak.id'], name='riwayat_imunisasi_id_anak_fkey', ondelete='RESTRICT'
        ),
        sa.ForeignKeyConstraint(
            ['id_master_imunisasi'], ['master_imunisasi.id'],
            name='riwayat_imunisasi_id_master_imunisasi_fkey', ondelete='RESTRICT'
        ),
        kader_fk('id_kader_pencatat', 'riwayat_imunisasi'),
        kader_fk('id_kader_updater', 'riwayat_imunisasi'),
    )

    op.create_index(op.f('ix_anak_id_ibu'), 'anak', ['id_ibu'], unique=False)
    op.create_index(op.f('ix_perkembangan_id_anak'), 'perkembangan', ['id_anak'], unique=False)
    op.create_index(op.f('ix_riwayat_imunisasi_id_anak'), 'riwayat_imunisasi', ['id_anak'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_riwayat_imunisasi_id_anak'), table_name='riwayat_imunisasi')
    op.drop_index(op.f('ix_perkembangan_id_anak'), table_name='perkembangan')
    op.drop_index(op.f('ix_anak_id_ibu'), table_name='anak')
    op.drop_table('riwayat_imunisasi')
    op.drop_table('master_imunisasi')
    op.drop_table('perkembangan')
    op.drop_table('anak')
    op.drop_table('ibu')
    op.drop_table('kader')
    sa.Enum(name='jeniskelamin').drop(op.get_bind(), checkfirst=True)
