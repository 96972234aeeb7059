"""/v1/profile and /v1/settings - questionnaire answers and display preferences"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from moneymate_gateway.api.v1.schemas import ProfileResponse, ProfileUpdate, SettingsResponse, SettingsUpdate
from moneymate_gateway.domain.models import UserProfile, UserSettings
from moneymate_gateway.infrastructure.database.session import get_db
from moneymate_gateway.infrastructure.database.repositories import ProfileRepository

router = APIRouter()


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    profile = ProfileRepository(db).get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")

    return ProfileResponse(
        user_id=user_id,
        age=profile.age,
        salary=profile.salary,
        marital_status=profile.marital_status,
        financial_goals=profile.financial_goals,
    )


@router.put("/profile", response_model=ProfileResponse)
def save_profile(request_body: ProfileUpdate, db: Session = Depends(get_db)):
    profile = UserProfile(
        age=request_body.age,
        salary=request_body.salary,
        marital_status=request_body.marital_status,
        financial_goals=request_body.financial_goals,
    )
    ProfileRepository(db).save_profile(request_body.user_id, profile)
    db.commit()
    return ProfileResponse(user_id=request_body.user_id, **request_body.model_dump(exclude={"user_id"}))


@router.get("/settings", response_model=SettingsResponse)
def get_settings(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Stored settings; users who never saved any get the defaults"""
    user_settings = ProfileRepository(db).get_settings(user_id)
    return SettingsResponse(
        user_id=user_id,
        display_name=user_settings.display_name,
        currency=user_settings.currency,
        locale=user_settings.locale,
        timezone=user_settings.timezone,
        theme=user_settings.theme,
    )


@router.put("/settings", response_model=SettingsResponse)
def save_settings(request_body: SettingsUpdate, db: Session = Depends(get_db)):
    user_settings = UserSettings(
        display_name=request_body.display_name,
        currency=request_body.currency,
        locale=request_body.locale,
        timezone=request_body.timezone,
        theme=request_body.theme,
    )
    ProfileRepository(db).save_settings(request_body.user_id, user_settings)
    db.commit()
    return SettingsResponse(user_id=request_body.user_id, **request_body.model_dump(exclude={"user_id"}))
