#PATHOGEN PRESETS

"""
Ready-made disease parameters for a few well known pathogens. Values are
rough literature estimates: they are meant to give a plausible starting
point for the sliders, not an accurate model of each disease.
"""


class Pathogen:
    def __init__(self, pathogen_id, name, description,
                 transmission_probability, latent_period, infectious_period, mortality_rate):
        self.id = pathogen_id
        self.name = name
        self.description = description
        self.transmission_probability = transmission_probability
        self.latent_period = latent_period
        self.infectious_period = infectious_period
        self.mortality_rate = mortality_rate

    def config_fields(self):
        return {
            "transmission_probability": self.transmission_probability,
            "latent_period": self.latent_period,
            "infectious_period": self.infectious_period,
            "mortality_rate": self.mortality_rate,
        }


PATHOGENS = [
    Pathogen("measles", "Measles Virus",
             "Highly contagious viral infection with respiratory transmission",
             transmission_probability=0.4, latent_period=10, infectious_period=4, mortality_rate=0.001),
    Pathogen("spanish_flu", "1918 Influenza",
             "The devastating 1918 \"Spanish Flu\" pandemic",
             transmission_probability=0.03, latent_period=2, infectious_period=7, mortality_rate=0.025),
    Pathogen("smallpox", "Smallpox",
             "Historical viral disease, eradicated in 1980",
             transmission_probability=0.05, latent_period=12, infectious_period=12, mortality_rate=0.3),
    Pathogen("sars_cov_2", "SARS-CoV-2",
             "Coronavirus causing COVID-19. Original variant",
             transmission_probability=0.02, latent_period=5, infectious_period=10, mortality_rate=0.01),
]

_BY_ID = {p.id: p for p in PATHOGENS}


def get_pathogen(pathogen_id) -> Pathogen:
    try:
        return _BY_ID[pathogen_id]
    except KeyError:
        raise KeyError(f"Unknown pathogen {pathogen_id!r}. Available: {sorted(_BY_ID)}") from None


#New config with the disease fields of the preset, everything else kept
def apply_pathogen(config, pathogen_id):
    return config.replace(**get_pathogen(pathogen_id).config_fields())
