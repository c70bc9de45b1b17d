"""
Routes JSON des evaluations de cours.

Expose la facade CohortCourseEvaluationService :
- sessions d'un formateur avec note moyenne
- evaluations d'un stagiaire (toutes, ou celle de la session en cours)
- evaluations d'une session
- lecture, creation et mise a jour d'une evaluation
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ...services.evaluation import CohortCourseEvaluationService
from ..deps import get_evaluation_service
from ..schemas import CohortCourseOut, EvaluationIn, EvaluationOut

router = APIRouter(tags=["evaluations"])

ServiceDep = Annotated[CohortCourseEvaluationService, Depends(get_evaluation_service)]


@router.get("/trainers/{user_name}/cohort-courses", response_model=list[CohortCourseOut])
def cohort_courses_for_trainer(user_name: str, service: ServiceDep):
    """Sessions du formateur, annotees de la note moyenne de connaissance."""
    records = service.get_cohort_courses_for_trainer(user_name)
    return [CohortCourseOut.model_validate(record) for record in records]


@router.get("/trainees/{user_name}/evaluations", response_model=list[EvaluationOut])
def evaluations_for_trainee(user_name: str, service: ServiceDep):
    records = service.get_cohort_course_evaluations_for_trainee(user_name)
    return [EvaluationOut.model_validate(record) for record in records]


@router.get("/trainees/{user_name}/evaluations/current", response_model=EvaluationOut)
def current_evaluation_for_trainee(user_name: str, service: ServiceDep):
    record = service.get_current_evaluation_for_trainee(user_name)
    return EvaluationOut.model_validate(record)


@router.get("/cohort-courses/{cohort_course_id}/evaluations", response_model=list[EvaluationOut])
def evaluations_for_course(cohort_course_id: int, service: ServiceDep):
    records = service.get_cohort_course_evaluations_for_course(cohort_course_id)
    return [EvaluationOut.model_validate(record) for record in records]


@router.get("/evaluations/{evaluation_id}", response_model=EvaluationOut)
def get_evaluation(evaluation_id: int, service: ServiceDep):
    record = service.get_cohort_course_evaluation(evaluation_id)
    return EvaluationOut.model_validate(record)


@router.post("/evaluations", response_model=EvaluationOut, status_code=status.HTTP_201_CREATED)
def create_evaluation(body: EvaluationIn, service: ServiceDep):
    """Cree l'evaluation d'une session pour un stagiaire."""
    record = service.create_course_evaluation_for_trainee(body.to_record())
    return EvaluationOut.model_validate(record)


@router.put("/evaluations/{evaluation_id}", response_model=EvaluationOut)
def update_evaluation(evaluation_id: int, body: EvaluationIn, service: ServiceDep):
    """Remplace le statut et les reponses d'une evaluation existante."""
    if body.id is not None and body.id != evaluation_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Evaluation id in body does not match the URL",
        )
    record = body.to_record()
    record.id = evaluation_id
    return EvaluationOut.model_validate(service.update_course_evaluation_for_trainee(record))
