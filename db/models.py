from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, JSON, false, func, text
from sqlalchemy.orm import relationship

from db.database import Base


class Role(Base):
    """
    유저의 권한을 나타내는 클래스입니다. (`admin` / `user`)
    참조 중인 role은 삭제할 수 없습니다.
    """
    __tablename__ = 'roles'

    id = Column(Integer, primary_key=True, nullable=False)
    name = Column(String, nullable=False, unique=True)

    users = relationship('User', back_populates='role')


class User(Base):
    """
    유저를 나타내는 클래스입니다. identity provider로 처음 인증될 때 자동으로 생성될 수 있습니다.
    """
    __tablename__ = 'users'

    id = Column(String, primary_key=True, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    school = Column(String, nullable=False, default='', server_default='')
    bg_username = Column(String, unique=True)
    profile_url = Column(String, nullable=False, default='', server_default='')
    is_locked = Column(Boolean, nullable=False, default=False, server_default=false())
    praises = Column(Integer, nullable=False, default=0, server_default=text('0'))
    demerits = Column(Integer, nullable=False, default=0, server_default=text('0'))
    user_rating = Column(Integer, nullable=False, default=0, server_default=text('0'))
    visits = Column(Integer, nullable=False, default=0, server_default=text('0'))
    reservation_count = Column(Integer, nullable=False, default=0, server_default=text('0'))
    role_id = Column(Integer, ForeignKey('roles.id', ondelete='NO ACTION'))
    email = Column(String, nullable=False, unique=True)
    phone = Column(String, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    role = relationship('Role', back_populates='users')
    reservations = relationship('Reservation', back_populates='user', passive_deletes=True)
    donations = relationship('Donation', back_populates='user', passive_deletes=True)


class Room(Base):
    """
    예약 가능한 공간입니다. `time_slots_taken`은 날짜 -> 예약된 시간 목록의 맵입니다.
    """
    __tablename__ = 'rooms'

    id = Column(String(36), primary_key=True, nullable=False)
    roomtype = Column(String)
    seats = Column(Integer)
    time_slots_taken = Column(JSON, nullable=False, default=dict)

    reservations = relationship('Reservation', back_populates='room', passive_deletes=True)


class Donation(Base):
    __tablename__ = 'donations'

    id = Column(String(36), primary_key=True, nullable=False)
    amount = Column(String, nullable=False)
    user_id = Column(String, ForeignKey('users.id', ondelete='CASCADE', onupdate='CASCADE'), nullable=False)
    email = Column(String)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    user = relationship('User', back_populates='donations')


class Reservation(Base):
    """
    공간 예약을 나타내는 클래스입니다. 유저나 공간이 삭제되면 예약도 함께 삭제됩니다.
    """
    __tablename__ = 'reservations'

    id = Column(String(36), primary_key=True, nullable=False)
    datetime = Column(String, nullable=False)
    duration = Column(String, nullable=False)
    user_id = Column(String, ForeignKey('users.id', ondelete='CASCADE', onupdate='CASCADE'), nullable=False)
    room_id = Column(String(36), ForeignKey('rooms.id', ondelete='CASCADE', onupdate='CASCADE'), nullable=False)
    donation_id = Column(String(36), ForeignKey('donations.id', ondelete='SET NULL'))

    user = relationship('User', back_populates='reservations')
    room = relationship('Room', back_populates='reservations')
