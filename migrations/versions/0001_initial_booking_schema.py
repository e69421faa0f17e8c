"""initial booking schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


membership_status = sa.Enum('active', 'expired', 'cancelled', name='membership_status')
difficulty_level = sa.Enum('beginner', 'intermediate', 'advanced', name='difficulty_level')
booking_status = sa.Enum('confirmed', 'cancelled', 'waitlist', name='booking_status')
session_status = sa.Enum('scheduled', 'completed', 'cancelled', name='session_status')


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'membership_tiers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('duration_months', sa.Integer(), nullable=False),
        sa.Column('features', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('price > 0', name='check_tier_price_positive'),
        sa.CheckConstraint('duration_months > 0', name='check_tier_duration_positive'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_membership_tiers_id', 'membership_tiers', ['id'], unique=False)

    op.create_table(
        'user_memberships',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('membership_tier_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', membership_status, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['membership_tier_id'], ['membership_tiers.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_user_memberships_id', 'user_memberships', ['id'], unique=False)
    op.create_index('ix_user_memberships_user_id', 'user_memberships', ['user_id'], unique=False)

    op.create_table(
        'trainers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('specialization', sa.String(), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.Column('hourly_rate', sa.Numeric(8, 2), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('hourly_rate >= 0', name='check_trainer_hourly_rate_non_negative'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_trainers_id', 'trainers', ['id'], unique=False)
    op.create_index('ix_trainers_email', 'trainers', ['email'], unique=True)

    op.create_table(
        'gym_classes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('instructor_id', sa.Integer(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('difficulty_level', difficulty_level, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['instructor_id'], ['trainers.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_gym_classes_id', 'gym_classes', ['id'], unique=False)

    op.create_table(
        'class_schedules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('room', sa.String(), nullable=False),
        sa.Column('available_spots', sa.Integer(), nullable=False),
        sa.Column('is_cancelled', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('available_spots >= 0', name='check_available_spots_non_negative'),
        sa.ForeignKeyConstraint(['class_id'], ['gym_classes.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_class_schedules_id', 'class_schedules', ['id'], unique=False)
    op.create_index('ix_class_schedules_start_time', 'class_schedules', ['start_time'], unique=False)

    op.create_table(
        'class_bookings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('schedule_id', sa.Integer(), nullable=False),
        sa.Column('booking_status', booking_status, nullable=False),
        sa.Column('booked_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('cancelled_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['schedule_id'], ['class_schedules.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_class_bookings_id', 'class_bookings', ['id'], unique=False)
    op.create_index('ix_class_bookings_user_id', 'class_bookings', ['user_id'], unique=False)
    op.create_index('ix_class_bookings_schedule_id', 'class_bookings', ['schedule_id'], unique=False)

    op.create_table(
        'personal_training_sessions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        sa.Column('session_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('status', session_status, nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(8, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('price >= 0', name='check_session_price_non_negative'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_personal_training_sessions_id', 'personal_training_sessions', ['id'], unique=False)
    op.create_index('ix_personal_training_sessions_user_id', 'personal_training_sessions', ['user_id'], unique=False)
    # Índice compuesto para la detección de solapamientos por entrenador y día
    op.create_index(
        'ix_pt_sessions_trainer_date_status', 'personal_training_sessions',
        ['trainer_id', 'session_date', 'status'], unique=False
    )

    op.create_table(
        'facilities',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_facilities_id', 'facilities', ['id'], unique=False)

    op.create_table(
        'gym_info',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('operating_hours', sa.JSON(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_gym_info_id', 'gym_info', ['id'], unique=False)


def downgrade():
    op.drop_index('ix_gym_info_id', table_name='gym_info')
    op.drop_table('gym_info')
    op.drop_index('ix_facilities_id', table_name='facilities')
    op.drop_table('facilities')
    op.drop_index('ix_pt_sessions_trainer_date_status', table_name='personal_training_sessions')
    op.drop_index('ix_personal_training_sessions_user_id', table_name='personal_training_sessions')
    op.drop_index('ix_personal_training_sessions_id', table_name='personal_training_sessions')
    op.drop_table('personal_training_sessions')
    op.drop_index('ix_class_bookings_schedule_id', table_name='class_bookings')
    op.drop_index('ix_class_bookings_user_id', table_name='class_bookings')
    op.drop_index('ix_class_bookings_id', table_name='class_bookings')
    op.drop_table('class_bookings')
    op.drop_index('ix_class_schedules_start_time', table_name='class_schedules')
    op.drop_index('ix_class_schedules_id', table_name='class_schedules')
    op.drop_table('class_schedules')
    op.drop_index('ix_gym_classes_id', table_name='gym_classes')
    op.drop_table('gym_classes')
    op.drop_index('ix_trainers_email', table_name='trainers')
    op.drop_index('ix_trainers_id', table_name='trainers')
    op.drop_table('trainers')
    op.drop_index('ix_user_memberships_user_id', table_name='user_memberships')
    op.drop_index('ix_user_memberships_id', table_name='user_memberships')
    op.drop_table('user_memberships')
    op.drop_index('ix_membership_tiers_id', table_name='membership_tiers')
    op.drop_table('membership_tiers')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')

    # Tipos ENUM nativos (sólo existen en PostgreSQL)
    bind = op.get_bind()
    for enum_type in (session_status, booking_status, difficulty_level, membership_status):
        enum_type.drop(bind, checkfirst=True)
