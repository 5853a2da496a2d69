import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from taskmanager.schemas.user import SignIn, UserOut
from taskmanager.models.user import User
from taskmanager.utils.auth import create_token
from taskmanager.database import get_db, store_errors

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

@router.post("/user", response_model=UserOut)
def sign_in(payload: SignIn, db: Session = Depends(get_db)):
    """Find or create the user for ``email`` and issue a fresh token."""
    created = False
    with store_errors(db, "sign in"):
        user = db.query(User).filter(User.email == payload.email).first()
        if not user:
            try:
                user = User(email=payload.email)
                db.add(user)
                db.commit()
                db.refresh(user)
                created = True
            except IntegrityError:
                # a concurrent sign-in inserted the same email first
                db.rollback()
                user = db.query(User).filter(User.email == payload.email).one()

    token = create_token({"sub": user.email})
    logger.info("Signed in %s (new user: %s)", user.email, created)
    return UserOut(id=user.id, email=user.email, token=token, created=created)
