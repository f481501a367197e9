#MAIN
from outbreak.events import PolicyReporterObserver, OutbreakReporterObserver
from outbreak.models import SimulationConfig
from outbreak.pathogens import apply_pathogen
from outbreak.simulation import Simulation

if __name__ == "__main__":
    #Build the whole simulation with a SARS-CoV-2 like disease
    config = apply_pathogen(SimulationConfig(population=1_000_000), "sars_cov_2")
    sim = Simulation(config)
    sim.bus.subscribe(PolicyReporterObserver())
    sim.bus.subscribe(OutbreakReporterObserver(every=30))

    #Masks from the start, vaccines ordered on day 30
    sim.implement_policy("masks")
    sim.run(max_days=30)
    sim.implement_policy("vaccination")

    #Run the rest of the year
    sim.run(max_days=335)
    sim.final_summary()
    print("\nSimulation complete.")
