from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.params import Path
from sqlalchemy.orm import Session
from starlette import status

from db.database import get_db
from schemas import donation
from service.donation_service import DonationService
from util import get_current_user

donation_router = APIRouter(
    prefix='/donations',
    tags=['Donations'],
    dependencies=[Depends(get_current_user)]
)


@donation_router.get('', response_model=List[donation.DonationBase], name='기부 목록 조회')
def get_donations(db: Session = Depends(get_db)):
    return DonationService(db).get_all()


@donation_router.get('/{donation_id}', response_model=donation.DonationBase, name='기부 조회', responses={
    404: {
        "description": "`donation_id`값을 가진 기부가 없는 경우",
        "content": {
            "application/json": {
                "example": {"error": "DonationNotFound"}
            }
        }
    }
})
def get_donation(db: Session = Depends(get_db), donation_id: str = Path(..., description='조회할 기부의 `id`')):
    return DonationService(db).get(donation_id)


@donation_router.post('', response_model=donation.DonationOutput, status_code=status.HTTP_201_CREATED,
                      name='기부 생성')
def create_donation(create_donation_request: donation.CreateDonation, db: Session = Depends(get_db)):
    created = DonationService(db).create(create_donation_request)
    return {'message': 'Donation successfully created.', 'donation': created}


@donation_router.put('', response_model=donation.DonationOutput, name='기부 수정')
@donation_router.put('/{donation_id}', response_model=donation.DonationOutput, name='기부 수정')
def update_donation(update_donation_request: donation.UpdateDonation, db: Session = Depends(get_db),
                    donation_id: Optional[str] = None):
    updated = DonationService(db).update(donation_id or update_donation_request.id, update_donation_request)
    return {'message': 'Donation updated.', 'donation': updated}


@donation_router.delete('/{donation_id}', response_model=donation.DonationOutput, name='기부 삭제')
def delete_donation(db: Session = Depends(get_db), donation_id: str = Path(..., description='삭제할 기부의 `id`')):
    """
    기부 내역을 삭제합니다. 이 기부를 참조하던 예약의 `donation_id`는 null이 됩니다.
    """
    deleted = DonationService(db).delete(donation_id)
    return {'message': f"Donation '{donation_id}' was deleted.", 'donation': deleted}
