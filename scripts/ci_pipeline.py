#!/usr/bin/env python3
"""
Pipeline de CI Local para el Proyecto time-series.
Ejecuta validaciones estáticas, tests de dominio y tests de capas externas.

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time
from datetime import datetime


# Colores para la terminal
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_step(step_name):
    print(f"\n{Colors.HEADER}=== EJECUTANDO: {step_name} ==={Colors.ENDC}")


def run_command(command, description):
    print(f"⏳ {description}...")
    start = time.time()
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        print(f"{Colors.OKGREEN}✅ PASÓ ({duration:.2f}s){Colors.ENDC}")
        return True, result.stdout

    print(f"{Colors.FAIL}❌ FALLÓ ({duration:.2f}s){Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDERR ---\n{result.stderr}{Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDOUT ---\n{result.stdout}{Colors.ENDC}")
    return False, result.stderr


def main():
    start_total = time.time()
    print(f"{Colors.BOLD}🚀 INICIANDO PIPELINE CI/CD - TIME WINDOWS{Colors.ENDC}")
    print(f"📅 Fecha: {datetime.now()}")

    # --- PASO 1: LINTER (Estilo) ---
    print_step("1. ANÁLISIS ESTÁTICO DE CÓDIGO (LINTING)")
    success, _ = run_command(
        "ruff check src/ tests/ demo_windows.py",
        "Verificando estilo de código (PEP8) y errores comunes",
    )
    if not success:
        # No bloqueante
        print(f"{Colors.WARNING}⚠️  Advertencias de estilo detectadas{Colors.ENDC}")

    # --- PASO 2: TYPE CHECKING (MyPy) ---
    print_step("2. VERIFICACIÓN DE TIPOS (DOMINIO)")
    success, _ = run_command(
        "mypy src/time_series/core src/time_series/modules/windows/domain "
        "--ignore-missing-imports --namespace-packages --explicit-package-bases",
        "Validando tipos estrictos en el Dominio",
    )
    if not success:
        print(f"{Colors.FAIL}⛔ El dominio viola el contrato de tipos.{Colors.ENDC}")
        sys.exit(1)

    # --- PASO 3: TESTS UNITARIOS ---
    print_step("3. TESTS UNITARIOS (CORE & DOMAIN)")
    success, _ = run_command(
        "pytest tests/core tests/modules/windows/domain -q",
        "Ejecutando el álgebra de ventanas",
    )
    if not success:
        sys.exit(1)

    # --- PASO 4: CAPAS EXTERNAS ---
    print_step("4. TESTS APPLICATION, INFRAESTRUCTURA & PRESENTATION")
    success, _ = run_command(
        "pytest tests/modules/windows/application tests/modules/windows/infrastructure "
        "tests/modules/windows/presentation -v",
        "Validando caso de uso, logs y renderizado",
    )
    if not success:
        sys.exit(1)

    # --- RESUMEN ---
    total_duration = time.time() - start_total
    print(f"\n{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"{Colors.OKGREEN}🎉  BUILD SUCCESSFUL{Colors.ENDC}")
    print(f"{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"⏱️ Tiempo Total: {total_duration:.2f}s")


if __name__ == "__main__":
    main()
