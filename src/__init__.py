"""
QA Feedback - Couche service du portail de feedback des formations.

Ce package recupere, agrege et persiste les evaluations qui relient
stagiaires, formateurs, cohortes et cours. Il calcule notamment la note
moyenne de connaissance du formateur pour chacune de ses sessions.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (operations, facade transactionnelle)
- infrastructure/ : Persistance SQLModel
- adapters/ : CLI ; web/ : API FastAPI
"""
