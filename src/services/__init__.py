"""
Couche application (cas d'utilisation).

Les services orchestrent la logique du domaine pour realiser les cas
d'utilisation de l'application. Ils dependent des ports (interfaces)
de core/, jamais des implementations concretes de infrastructure/.

Sous-packages :
- evaluation/ : Operations sur les evaluations de cours et facade transactionnelle
"""
