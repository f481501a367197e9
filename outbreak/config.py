#PARAMETERS FOR THE SIMULATION

#Population of the simulated region
POPULATION = 1_000_000

#Infectious people at day 0
INITIAL_INFECTED = 1

#Probability that an infectious person dies instead of recovering
MORTALITY_RATE = 0.02

#Duration (days) a person stays infectious
INFECTIOUS_PERIOD = 14

#Duration (days) between exposure and becoming infectious
LATENT_PERIOD = 5

#Fallback periods used when a caller supplies a non-positive value
DEFAULT_INFECTIOUS_PERIOD = 14
DEFAULT_LATENT_PERIOD = 3

#Average number of contacts per person per day
CONTACTS_PER_DAY = 10

#Probability of transmission per contact
TRANSMISSION_PROBABILITY = 0.015

#Economic cost of one death
ECONOMIC_COST_PER_DEATH = 1_000_000

#Simulated days per wall-clock second
DAYS_PER_SECOND = 10


#Win/lose conditions
ENABLE_WIN_LOSE = False
MAX_DEATH_PERCENTAGE = 0.01      #Fraction of the population
MAX_ECONOMIC_COST = 1_000_000_000_000


#Maximum combined reduction any stack of policies can reach
POLICY_EFFECT_CAP = 0.95


#Vaccination programme
VACCINATION_INITIAL_COST = 10_000_000_000   #Research and development, charged at launch
VACCINATION_DAILY_CAPACITY = 0.01           #Fraction of the population per day
VACCINATION_COST_PER_DOSE = 20
VACCINATION_DELAY = 100
