# meowmatch/conftest.py
"""
테스트 공용 픽스처

- FakeFirestore: firebase_admin.firestore 클라이언트에서 이 프로젝트가 쓰는 부분만 흉내 낸 인메모리 대역
- FakeAuthBackend / FakeAuthClient: Firebase Authentication 세션 쿠키 흐름의 대역
"""
import copy
import uuid
from datetime import timedelta

import pytest
from google.api_core.exceptions import NotFound

from meowmatch import create_app
from meowmatch.core.errors import AuthError
from meowmatch.services.firebase_auth_client import AuthEvent, AuthSession, AuthUser, Subscription
from meowmatch.utils.datetime_utils import DateTimeUtils


# =====================================================================================
# Firestore 대역
# =====================================================================================
class FakeDocumentSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, collection, doc_id):
        self._collection = collection
        self.id = doc_id

    @property
    def _store(self):
        return self._collection._docs

    def get(self):
        self._collection._db._check('read')
        return FakeDocumentSnapshot(self.id, self._store.get(self.id))

    def set(self, data):
        self._collection._db._check('write')
        self._store[self.id] = copy.deepcopy(data)

    def update(self, data):
        self._collection._db._check('write')
        if self.id not in self._store:
            raise NotFound(f"No document to update: {self.id}")
        self._store[self.id].update(copy.deepcopy(data))

    def delete(self):
        self._collection._db._check('write')
        self._store.pop(self.id, None)


class FakeQuery:
    def __init__(self, collection, filters=(), order=None, limit=None):
        self._collection = collection
        self._filters = tuple(filters)
        self._order = order
        self._limit = limit

    def where(self, field, op, value):
        assert op == '==', f"unsupported operator {op}"
        return FakeQuery(self._collection, self._filters + ((field, value),), self._order, self._limit)

    def order_by(self, field, direction='ASCENDING'):
        return FakeQuery(self._collection, self._filters, (field, direction), self._limit)

    def limit(self, count):
        return FakeQuery(self._collection, self._filters, self._order, count)

    def stream(self):
        self._collection._db._check('read')
        items = [
            (doc_id, data) for doc_id, data in self._collection._docs.items()
            if all(data.get(field) == value for field, value in self._filters)
        ]
        if self._order:
            field, direction = self._order
            # Firestore 는 정렬 필드가 없는 문서를 결과에서 제외함
            items = [item for item in items if item[1].get(field) is not None]
            items.sort(key=lambda item: item[1][field], reverse=(direction == 'DESCENDING'))
        if self._limit is not None:
            items = items[:self._limit]
        return iter([FakeDocumentSnapshot(doc_id, copy.deepcopy(data)) for doc_id, data in items])


class FakeCollection(FakeQuery):
    def __init__(self, db, name):
        self._db = db
        self.name = name
        self._docs = {}
        super().__init__(self)

    def document(self, doc_id=None):
        return FakeDocumentReference(self, doc_id or str(uuid.uuid4()))


class FakeFirestore:
    """fail_reads / fail_writes 를 켜면 해당 작업에서 백엔드 장애를 흉내 냅니다."""
    def __init__(self):
        self._collections = {}
        self.fail_reads = False
        self.fail_writes = False
        self.reads = 0
        self.writes = 0

    def _check(self, kind):
        if kind == 'read':
            self.reads += 1
            if self.fail_reads:
                raise RuntimeError("backend unavailable")
        else:
            self.writes += 1
            if self.fail_writes:
                raise RuntimeError("backend unavailable")

    def collection(self, name):
        if name not in self._collections:
            self._collections[name] = FakeCollection(self, name)
        return self._collections[name]

    def docs(self, name):
        """테스트 검증용: 컬렉션의 원본 데이터."""
        return self.collection(name)._docs


# =====================================================================================
# Firebase Auth 대역
# =====================================================================================
class FakeAuthBackend:
    """ID 토큰/세션 쿠키 발급 상태를 보관하는 가짜 인증 서버."""
    def __init__(self):
        self.id_tokens = {}
        self.sessions = {}
        self.fail_sign_out = False

    def register(self, user_id, email=None):
        """사용자를 등록하고 (id_token, session_token) 을 돌려줍니다."""
        user = AuthUser(user_id=user_id, email=email or f"{user_id}@example.com")
        id_token = f"id-{user_id}"
        session_token = f"session-{user_id}"
        self.id_tokens[id_token] = user
        self.sessions[session_token] = user
        return id_token, session_token

    def client(self, session_token=None):
        return FakeAuthClient(self, session_token)


class FakeAuthClient:
    def __init__(self, backend, session_token=None):
        self.backend = backend
        self.session_token = session_token
        self.listeners = []

    def on_auth_state_change(self, listener):
        self.listeners.append(listener)
        return Subscription(self.listeners, listener)

    def emit(self, event, session):
        for listener in list(self.listeners):
            listener(event, session)

    def _session(self, token):
        user = self.backend.sessions.get(token)
        if user is None:
            return None
        return AuthSession(user=user, token=token, expires_at=DateTimeUtils.now() + timedelta(days=5))

    def get_session(self):
        return self._session(self.session_token) if self.session_token else None

    def sign_in_with_id_token(self, id_token):
        user = self.backend.id_tokens.get(id_token)
        if user is None:
            raise AuthError("Invalid or expired sign-in token.")
        token = f"session-{user.user_id}"
        self.backend.sessions[token] = user
        self.session_token = token
        session = self._session(token)
        self.emit(AuthEvent.SIGNED_IN, session)
        return session

    def sign_out(self):
        if self.backend.fail_sign_out:
            raise AuthError("Sign-out failed.")
        self.backend.sessions.pop(self.session_token, None)
        self.session_token = None
        self.emit(AuthEvent.SIGNED_OUT, None)


# =====================================================================================
# 픽스처
# =====================================================================================
def make_cat_doc(name="Whiskers", age="kitten", color="orange", size="small", gender="male",
                 personality=None, good_with=None, is_available=True, minutes_ago=0, shelter_id="shelter-1"):
    """Firestore 'cats' 문서 형태의 딕셔너리."""
    created_at = DateTimeUtils.now() - timedelta(minutes=minutes_ago)
    return {
        'name': name, 'age': age, 'color': color, 'size': size, 'gender': gender,
        'personality': personality if personality is not None else ['playful'],
        'good_with': good_with if good_with is not None else [],
        'description': f"{name} is a lovely cat looking for a home.",
        'image_url': f"https://example.com/{name.lower()}.jpg",
        'is_available': is_available, 'shelter_id': shelter_id,
        'created_at': created_at, 'updated_at': created_at
    }


def valid_cat_fields(**overrides):
    fields = {
        'name': "Luna", 'age': "young", 'color': "black", 'size': "medium", 'gender': "female",
        'personality': ["calm", "affectionate"], 'good_with': ["children", "other-cats"],
        'description': "A beautiful black cat with a serene temperament.",
        'image_url': "https://example.com/luna.jpg", 'is_available': True
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def auth_backend():
    return FakeAuthBackend()


@pytest.fixture
def app(db, auth_backend):
    return create_app('testing', db=db, auth_client_factory=auth_backend.client)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def shelter(db):
    db.collection('shelters').document('shelter-1').set({'shelter_id': 'shelter-1', 'name': "Main Shelter"})
    return 'shelter-1'


@pytest.fixture
def sign_in_as(client, db, auth_backend, app):
    """지정한 역할을 가진 사용자로 로그인한 상태의 세션 쿠키를 설정합니다."""
    def _sign_in(user_id, *roles):
        for role in roles:
            db.collection('user_roles').document().set({'user_id': user_id, 'role': role})
        _, session_token = auth_backend.register(user_id)
        client.set_cookie(app.config['SESSION_TOKEN_COOKIE'], session_token)
        return session_token
    return _sign_in
