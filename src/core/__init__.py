"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur
et exceptions. Cette couche n'a AUCUNE dependance vers l'infrastructure
(BDD, frameworks web).

Sous-packages :
- entities/ : Entites metier (Trainer, CohortCourse, CohortCourseEvaluation...)
- ports/ : Interfaces abstraites des repositories
- value_objects/ : Objets valeur immutables (ParsedResponseValue)
"""
