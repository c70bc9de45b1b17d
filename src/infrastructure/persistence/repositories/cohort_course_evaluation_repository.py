"""
Implementation SQLModel du repository CohortCourseEvaluation.

Une evaluation est stockee sur trois tables : l'evaluation elle-meme,
ses reponses par categorie et les reponses aux questions. Le repository
reconstitue l'agregat complet a la lecture et remplace les reponses
a l'ecriture.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from src.core.entities.evaluation import (
    CohortCourseEvaluation,
    EvalQuestionCategoryResponse,
    EvaluationStatus,
    QuestionCategory,
    QuestionResponse,
)
from src.core.entities.portal import CohortCourse, Trainee
from src.core.ports.repositories import ICohortCourseEvaluationRepository
from src.infrastructure.persistence.models import (
    CohortCourseEvaluationModel,
    CohortCourseModel,
    EvalCategoryResponseModel,
    QuestionCategoryModel,
    QuestionResponseModel,
    TraineeModel,
)
from src.infrastructure.persistence.repositories.cohort_course_repository import (
    SQLModelCohortCourseRepository,
)
from src.infrastructure.persistence.repositories.trainer_repository import (
    trainee_to_entity,
)


class SQLModelCohortCourseEvaluationRepository(ICohortCourseEvaluationRepository):
    """
    Repository SQLModel pour les evaluations de sessions.

    Les ecritures sont envoyees par flush() : la validation de la
    transaction reste a la charge du service.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session
        self._cohort_course_repo = SQLModelCohortCourseRepository(session)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def _load_category_responses(self, evaluation_id: int) -> list[EvalQuestionCategoryResponse]:
        """Charge les reponses par categorie d'une evaluation, par ordre d'ID."""
        statement = (
            select(EvalCategoryResponseModel)
            .where(EvalCategoryResponseModel.evaluation_id == evaluation_id)
            .order_by(EvalCategoryResponseModel.id)
        )
        responses = []
        for model in self._session.exec(statement).all():
            category_model = self._session.get(QuestionCategoryModel, model.category_id)
            category = None
            if category_model:
                category = QuestionCategory(
                    id=category_model.id,
                    category_name=category_model.category_name,
                )
            responses.append(
                EvalQuestionCategoryResponse(
                    id=model.id,
                    question_category=category,
                    question_responses=self._load_question_responses(model.id),
                    comment=model.comment,
                )
            )
        return responses

    def _load_question_responses(self, category_response_id: int) -> list[QuestionResponse]:
        """Charge les reponses aux questions d'une categorie, par ordre d'ID."""
        statement = (
            select(QuestionResponseModel)
            .where(QuestionResponseModel.category_response_id == category_response_id)
            .order_by(QuestionResponseModel.id)
        )
        return [
            QuestionResponse(
                id=model.id,
                question_id=model.question_id,
                response_values=model.response_values,
                comment=model.comment,
            )
            for model in self._session.exec(statement).all()
        ]

    def _to_entity(self, model: CohortCourseEvaluationModel) -> CohortCourseEvaluation:
        """
        Convertit un modele DB en entite domaine (agregat complet).

        Args :
            model : Le modele CohortCourseEvaluationModel depuis la DB

        Retourne :
            L'entite CohortCourseEvaluation avec stagiaire, session et reponses
        """
        trainee_model = self._session.get(TraineeModel, model.trainee_id)
        cohort_course_model = self._session.get(CohortCourseModel, model.cohort_course_id)

        return CohortCourseEvaluation(
            id=model.id,
            trainee=trainee_to_entity(trainee_model) if trainee_model else None,
            cohort_course=(
                self._cohort_course_repo.to_entity(cohort_course_model)
                if cohort_course_model
                else None
            ),
            category_responses=self._load_category_responses(model.id),
            status=EvaluationStatus(model.status),
            last_updated=model.last_updated,
        )

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    def get_by_id(self, evaluation_id: int) -> Optional[CohortCourseEvaluation]:
        """Recupere une evaluation par son ID."""
        model = self._session.get(CohortCourseEvaluationModel, evaluation_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_cohort_course(self, cohort_course: CohortCourse) -> list[CohortCourseEvaluation]:
        """Liste les evaluations d'une session."""
        if cohort_course.id is None:
            return []
        statement = (
            select(CohortCourseEvaluationModel)
            .where(CohortCourseEvaluationModel.cohort_course_id == cohort_course.id)
            .order_by(CohortCourseEvaluationModel.id)
        )
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def find_by_trainee(self, trainee: Trainee) -> list[CohortCourseEvaluation]:
        """Liste les evaluations redigees par un stagiaire."""
        if trainee.id is None:
            return []
        statement = (
            select(CohortCourseEvaluationModel)
            .where(CohortCourseEvaluationModel.trainee_id == trainee.id)
            .order_by(CohortCourseEvaluationModel.id)
        )
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def find_by_trainee_and_cohort_course(
        self,
        trainee: Trainee,
        cohort_course: CohortCourse,
    ) -> Optional[CohortCourseEvaluation]:
        """Recupere l'evaluation d'un stagiaire pour une session donnee."""
        if trainee.id is None or cohort_course.id is None:
            return None
        statement = (
            select(CohortCourseEvaluationModel)
            .where(CohortCourseEvaluationModel.trainee_id == trainee.id)
            .where(CohortCourseEvaluationModel.cohort_course_id == cohort_course.id)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    # ------------------------------------------------------------------
    # Ecriture
    # ------------------------------------------------------------------

    def _delete_category_responses(self, evaluation_id: int) -> None:
        """Supprime les reponses existantes d'une evaluation."""
        statement = select(EvalCategoryResponseModel).where(
            EvalCategoryResponseModel.evaluation_id == evaluation_id
        )
        for category_model in self._session.exec(statement).all():
            question_statement = select(QuestionResponseModel).where(
                QuestionResponseModel.category_response_id == category_model.id
            )
            for question_model in self._session.exec(question_statement).all():
                self._session.delete(question_model)
            self._session.delete(category_model)
        self._session.flush()

    def _insert_category_responses(
        self,
        evaluation_id: int,
        category_responses: list[EvalQuestionCategoryResponse],
    ) -> None:
        """Insere les reponses par categorie et leurs reponses aux questions."""
        for category_response in category_responses:
            category = category_response.question_category
            if category is None or category.id is None:
                raise ValueError("Categorie de question non resolue")
            category_model = EvalCategoryResponseModel(
                evaluation_id=evaluation_id,
                category_id=category.id,
                comment=category_response.comment,
            )
            self._session.add(category_model)
            self._session.flush()
            for question_response in category_response.question_responses:
                self._session.add(
                    QuestionResponseModel(
                        category_response_id=category_model.id,
                        question_id=question_response.question_id,
                        response_values=question_response.response_values,
                        comment=question_response.comment,
                    )
                )
        self._session.flush()

    def save(self, evaluation: CohortCourseEvaluation) -> CohortCourseEvaluation:
        """Sauvegarde une evaluation (insertion ou mise a jour)."""
        if evaluation.trainee is None or evaluation.trainee.id is None:
            raise ValueError("Evaluation sans stagiaire")
        if evaluation.cohort_course is None or evaluation.cohort_course.id is None:
            raise ValueError("Evaluation sans session de cours")

        existing = None
        if evaluation.id is not None:
            existing = self._session.get(CohortCourseEvaluationModel, evaluation.id)

        if existing:
            # Mise a jour
            existing.trainee_id = evaluation.trainee.id
            existing.cohort_course_id = evaluation.cohort_course.id
            existing.status = evaluation.status.value
            existing.last_updated = evaluation.last_updated or datetime.utcnow()
            self._session.add(existing)
            self._delete_category_responses(existing.id)
            model = existing
        else:
            # Insertion
            model = CohortCourseEvaluationModel(
                trainee_id=evaluation.trainee.id,
                cohort_course_id=evaluation.cohort_course.id,
                status=evaluation.status.value,
                last_updated=evaluation.last_updated or datetime.utcnow(),
            )
            self._session.add(model)
            self._session.flush()

        self._insert_category_responses(model.id, evaluation.category_responses)
        self._session.refresh(model)
        return self._to_entity(model)
