"""initial tables

Revision ID: 0001
Revises:
Create Date: 2025-09-05

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

WEEKDAYS = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')
RECURRENCES = ('daily', 'weekly', 'biweekly', 'monthly', 'yearly', 'none', 'once')
CATEGORIES = ('general', 'academic', 'event', 'other', 'assignment', 'exam')
AUDIENCES = ('all', 'students', 'teachers', 'parents')
PRIORITIES = ('high', 'medium', 'low')
SUBJECTS = (
    'Cloud Computing', 'Computer Networks', 'DataBase Management System',
    'Advanced Data Structure', 'Service Oriented Architecture',
    'Object Oriented Programming', 'Other',
)

def _enum(values, name, length=16):
    # stored as VARCHAR + CHECK, same as the models (native_enum=False)
    return sa.Enum(*values, name=name, native_enum=False, length=length)

def _tenant_columns():
    return [
        sa.Column('section_id', sa.Integer(), sa.ForeignKey('sections.id', ondelete='CASCADE'), nullable=False),
        sa.Column('year_id', sa.Integer(), sa.ForeignKey('years.id', ondelete='CASCADE'), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_by_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]

def upgrade():
    bind = op.get_bind()
    dialect = bind.dialect.name

    op.create_table('departments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False, unique=True),
    )

    op.create_table('years',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('year', _enum(('FIRST', 'SECOND', 'THIRD', 'FOURTH'), 'yearlabel'), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('year', 'department_id', name='uq_year_department'),
    )

    section_cols = [
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('year_id', sa.Integer(), sa.ForeignKey('years.id', ondelete='CASCADE'), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id', ondelete='CASCADE'), nullable=False),
        sa.Column('cr_id', sa.Integer(), nullable=True),
        sa.UniqueConstraint('name', 'year_id', 'department_id', name='uq_section_year_department'),
    ]
    if dialect == "sqlite":
        # no ALTER ... ADD CONSTRAINT on SQLite; forward references are allowed inline
        section_cols.append(sa.ForeignKeyConstraint(['cr_id'], ['users.id'], name='fk_sections_cr_id', ondelete='SET NULL'))
    op.create_table('sections', *section_cols)
    op.create_index('ix_sections_year', 'sections', ['year_id'])

    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(16), nullable=False, server_default='student'),
        sa.Column('section_id', sa.Integer(), sa.ForeignKey('sections.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('year_id', sa.Integer(), sa.ForeignKey('years.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])
    op.create_index('ix_users_section_id', 'users', ['section_id'])

    if dialect != "sqlite":
        op.create_foreign_key('fk_sections_cr_id', 'sections', 'users', ['cr_id'], ['id'], ondelete='SET NULL')

    op.create_table('schedules',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('subject', sa.String(255), nullable=False),
        sa.Column('room', sa.String(100), nullable=False),
        sa.Column('day', _enum(WEEKDAYS, 'weekday'), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('recurrence', _enum(RECURRENCES, 'recurrence'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('teacher', sa.String(255), nullable=True),
        *_tenant_columns(),
    )
    op.create_index('ix_schedules_date', 'schedules', ['date'])
    op.create_index('ix_schedules_section_id', 'schedules', ['section_id'])
    op.create_index('ix_schedules_section_day', 'schedules', ['section_id', 'day'])

    op.create_table('announcements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author', sa.String(255), nullable=False),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('urgent', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('category', _enum(CATEGORIES, 'category'), nullable=False),
        sa.Column('audience', _enum(AUDIENCES, 'audience'), nullable=False),
        *_tenant_columns(),
    )
    op.create_index('ix_announcements_section_id', 'announcements', ['section_id'])
    op.create_index('ix_announcements_section_created', 'announcements', ['section_id', 'created_at'])

    op.create_table('reminders',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('time', sa.Time(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('priority', _enum(PRIORITIES, 'priority'), nullable=False),
        sa.Column('related_to', _enum(SUBJECTS, 'relatedsubject', length=64), nullable=False),
        *_tenant_columns(),
    )
    op.create_index('ix_reminders_section_id', 'reminders', ['section_id'])
    op.create_index('ix_reminders_section_date', 'reminders', ['section_id', 'date'])

def downgrade():
    bind = op.get_bind()
    for name in ('reminders', 'announcements', 'schedules'):
        op.drop_table(name)
    if bind.dialect.name != "sqlite":
        op.drop_constraint('fk_sections_cr_id', 'sections', type_='foreignkey')
    op.drop_table('users')
    op.drop_table('sections')
    op.drop_table('years')
    op.drop_table('departments')
