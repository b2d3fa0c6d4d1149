"""Create learning content tables

Revision ID: 001
Revises:
Create Date: 2025-09-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'quizzes',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(300), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('quiz_type', sa.String(50), nullable=False),
        sa.Column('difficulty_level', sa.Integer, nullable=True, server_default='1'),
        sa.Column('time_limit', sa.Integer, nullable=True),
        sa.Column('questions', postgresql.JSONB, nullable=False, server_default='[]'),
        sa.Column('category_id', sa.Uuid(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_quizzes_title_created_by', 'quizzes', ['title', 'created_by'])

    op.create_table(
        'vocabulary',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('english_word', sa.String(200), nullable=False),
        sa.Column('gujarati_word', sa.String(200), nullable=False),
        sa.Column('gujarati_transliteration', sa.String(200), nullable=True),
        sa.Column('difficulty_level', sa.Integer, nullable=True, server_default='1'),
        sa.Column('audio_url', sa.Text, nullable=True),
        sa.Column('image_url', sa.Text, nullable=True),
        sa.Column('category_id', sa.Uuid(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_vocabulary_word_pair', 'vocabulary', ['english_word', 'gujarati_word'])

    op.create_table(
        'dialogues',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(300), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('scenario', sa.Text, nullable=False),
        sa.Column('dialogue_data', postgresql.JSONB, nullable=False, server_default='[]'),
        sa.Column('difficulty_level', sa.Integer, nullable=True, server_default='1'),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_dialogues_title_created_by', 'dialogues', ['title', 'created_by'])

    op.create_table(
        'quiz_attempts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('quiz_id', sa.Uuid(), sa.ForeignKey('quizzes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('score', sa.Integer, nullable=False),
        sa.Column('max_score', sa.Integer, nullable=False),
        sa.Column('time_taken', sa.Integer, nullable=True),
        sa.Column('answers', postgresql.JSONB, nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_quiz_attempts_user_id', 'quiz_attempts', ['user_id'])
    op.create_index('ix_quiz_attempts_quiz_id', 'quiz_attempts', ['quiz_id'])

    op.create_table(
        'app_usage_sessions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('session_start', sa.DateTime(timezone=True), nullable=False),
        sa.Column('session_end', sa.DateTime(timezone=True), nullable=True),
        sa.Column('total_time_minutes', sa.Integer, nullable=False, server_default='0'),
        sa.Column('page_visits', postgresql.JSONB, nullable=False, server_default='{}'),
        sa.Column('activities_completed', sa.Integer, nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_app_usage_sessions_user_id', 'app_usage_sessions', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_app_usage_sessions_user_id', table_name='app_usage_sessions')
    op.drop_table('app_usage_sessions')
    op.drop_index('ix_quiz_attempts_quiz_id', table_name='quiz_attempts')
    op.drop_index('ix_quiz_attempts_user_id', table_name='quiz_attempts')
    op.drop_table('quiz_attempts')
    op.drop_index('ix_dialogues_title_created_by', table_name='dialogues')
    op.drop_table('dialogues')
    op.drop_index('ix_vocabulary_word_pair', table_name='vocabulary')
    op.drop_table('vocabulary')
    op.drop_index('ix_quizzes_title_created_by', table_name='quizzes')
    op.drop_table('quizzes')
