"""RS9W device bridge package.

Feature modules (auth, employees, attendance) follow a thin Flask controller
layer over service/repository layers. The terminal polls the employee
snapshot and pushes punches; the store is reached through repositories only.
"""
