"""Company endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.models.company import Company
from backend.app.schemas.company import CompanyCreate, CompanyRead

router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.get("", response_model=list[CompanyRead])
async def list_companies(db: Session = Depends(get_db)):
    return db.query(Company).order_by(Company.name.asc()).all()


@router.post("", response_model=CompanyRead, status_code=201)
async def create_company(company_in: CompanyCreate, db: Session = Depends(get_db)):
    company = Company(**company_in.model_dump())
    db.add(company)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Company already exists")
    db.refresh(company)
    return company
